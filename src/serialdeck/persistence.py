"""Save and load the default serial configuration."""

from __future__ import annotations

from pathlib import Path

import platformdirs
from pydantic import ValidationError

from serialdeck.exceptions import PersistenceError
from serialdeck.models.serial_config import SerialConfig
from serialdeck.utils.logging import APP_NAME, get_logger

logger = get_logger(__name__)

CONFIG_FILENAME = "config.json"


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir(APP_NAME)) / CONFIG_FILENAME


class ConfigStore:
    """JSON file holding one :class:`SerialConfig`."""

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path else default_config_path()

    def save(self, config: SerialConfig) -> Path:
        """Write ``config`` to :attr:`path`.

        Raises:
            PersistenceError: If the directory or file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(config.model_dump_json(indent=2), encoding="utf-8")
        except OSError as exc:
            raise PersistenceError(f"Failed to write config file: {exc}") from exc
        logger.info("config_saved", path=str(self.path))
        return self.path

    def load(self) -> SerialConfig | None:
        """Read the saved config; None when missing or unreadable."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("config_read_failed", path=str(self.path), error=str(exc))
            return None
        try:
            config = SerialConfig.model_validate_json(raw)
        except ValidationError as exc:
            logger.warning("config_invalid", path=str(self.path), errors=exc.error_count())
            return None
        logger.info("config_loaded", path=str(self.path))
        return config
