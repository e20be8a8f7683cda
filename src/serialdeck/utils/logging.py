"""Structured logging setup.

Modules log events by name with keyword context::

    logger = get_logger(__name__)
    logger.info("session_added", index=1, session_id=4)

The terminal belongs to the UI while the app runs, so records go to a log
file rather than a console stream.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import platformdirs
import structlog

APP_NAME = "serialdeck"
LOG_LEVEL_ENV = "SERIALDECK_LOG_LEVEL"
DEFAULT_LEVEL = "INFO"


def default_log_file() -> Path:
    """Return the platform log path, e.g. ``~/.local/state/serialdeck/log/serialdeck.log``."""
    return Path(platformdirs.user_log_dir(APP_NAME)) / f"{APP_NAME}.log"


def resolve_level(level: str | None = None) -> str:
    """Pick the level: explicit argument, then the environment, then INFO."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LEVEL)
    level = level.upper()
    if level not in logging.getLevelNamesMapping():
        return DEFAULT_LEVEL
    return level


def setup_logging(
    level: str | None = None,
    json_output: bool = False,
    log_file: Path | str | None = None,
) -> Path:
    """Configure stdlib logging and structlog to write to ``log_file``.

    Args:
        level: Log level name. When None, ``SERIALDECK_LOG_LEVEL`` is used if it
            names a valid level, otherwise INFO.
        json_output: Render records as JSON lines instead of key=value text.
        log_file: Destination file. Defaults to :func:`default_log_file`.

    Returns:
        The path records are written to.
    """
    level = resolve_level(level)
    path = Path(log_file) if log_file else default_log_file()
    path.parent.mkdir(parents=True, exist_ok=True)

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    return path


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a named structlog logger."""
    return structlog.get_logger(name)
