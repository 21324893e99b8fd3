# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from nexus.config import NexusConfig, get_config, get_config_dir, save_config
from nexus.logging_setup import parse_level, setup_logging


def test_config_dir_follows_environment(tmp_path: Path) -> None:
    assert get_config_dir() == tmp_path / "nexus-home"


def test_defaults_when_no_file() -> None:
    config = get_config()

    assert config.data_dir == get_config_dir()
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_save_and_reload(tmp_path: Path) -> None:
    config = NexusConfig(data_dir=tmp_path / "data", log_level="INFO")

    written = save_config(config)

    assert written == get_config_dir() / "config.json"
    assert get_config() == config


def test_invalid_file_gives_defaults(caplog: pytest.LogCaptureFixture) -> None:
    get_config_dir().mkdir(parents=True)
    (get_config_dir() / "config.json").write_text("{broken", encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="nexus"):
        config = get_config()

    assert config == NexusConfig()
    assert "Ignoring invalid config" in caplog.text


@pytest.mark.parametrize(
    "value, expected",
    [("info", logging.INFO), (" DEBUG ", logging.DEBUG), (30, 30)],
)
def test_parse_level(value, expected) -> None:
    assert parse_level(value) == expected


def test_parse_level_rejects_unknown() -> None:
    with pytest.raises(ValueError):
        parse_level("chatty")


def test_setup_logging_writes_debug_to_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "nexus.log"

    setup_logging("ERROR", log_file)
    logging.getLogger("nexus.test").debug("hello from the test")
    for h in logging.getLogger("nexus").handlers:
        h.flush()

    assert "hello from the test" in log_file.read_text(encoding="utf-8")
    assert len(logging.getLogger("nexus").handlers) == 2
