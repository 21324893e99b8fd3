"""Configuration storage for Nexus.

Stores user preferences in <config dir>/config.json, where the config
dir is $NEXUS_HOME or ~/.nexus.
"""

import json
import logging
import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_HOME_ENV = "NEXUS_HOME"
CONFIG_FILE_NAME = "config.json"


def get_config_dir() -> Path:
    """Get the Nexus config directory (not created)."""
    env_home = os.environ.get(CONFIG_HOME_ENV)
    if env_home:
        return Path(env_home).expanduser()
    return Path.home() / ".nexus"


class NexusConfig(BaseModel):
    """User configuration."""

    data_dir: Path = Field(
        default_factory=get_config_dir,
        description="Directory holding the workspace key files",
    )
    log_level: str = "WARNING"
    log_file: Optional[Path] = None


def get_config(config_dir: Path | None = None) -> NexusConfig:
    """Load configuration, falling back to defaults.

    A missing file gives defaults silently; an unreadable or invalid
    file gives defaults and a warning.
    """
    config_file = (config_dir or get_config_dir()) / CONFIG_FILE_NAME
    if config_file.exists():
        try:
            data = json.loads(config_file.read_text(encoding="utf-8"))
            return NexusConfig(**data)
        except (OSError, json.JSONDecodeError, TypeError, ValidationError) as e:
            logger.warning("Ignoring invalid config %s: %s", config_file, e)
    return NexusConfig()  # defaults


def save_config(config: NexusConfig, config_dir: Path | None = None) -> Path:
    """Save configuration and return the file written."""
    directory = config_dir or get_config_dir()
    directory.mkdir(parents=True, exist_ok=True)
    config_file = directory / CONFIG_FILE_NAME
    config_file.write_text(
        json.dumps(config.model_dump(mode="json"), indent=2),
        encoding="utf-8",
    )
    return config_file
