"""Logging configuration for the command-line front end.

Library modules only create loggers; handlers are installed here, once,
by the entry point.
"""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str | int) -> int:
    """Turn "info", "DEBUG" or 20 into a logging level number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return value


def setup_logging(
    level: str | int = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the ``nexus`` logger hierarchy.

    - stderr handler at the given level, so diagnostics never mix with
      command output on stdout
    - optional file handler that records everything down to DEBUG
    """
    logger = logging.getLogger("nexus")
    logger.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(parse_level(level))
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file is not None:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        logger.addHandler(fh)
