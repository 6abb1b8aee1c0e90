"""Configuration management utilities."""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from ..models.config import AppSettings
from ..services.exceptions import ConfigError

logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and saves task manager settings."""

    def __init__(self, config_file: Optional[Path] = None):
        """Initialize config manager.

        Args:
            config_file: JSON settings file; built-in defaults are used without one
        """
        self.config_file = Path(config_file) if config_file else None

    def load_settings(self) -> AppSettings:
        """Load settings, falling back to defaults when there is no file.

        Raises:
            ConfigError: If the file is not valid JSON or not valid settings
        """
        if self.config_file is None or not self.config_file.exists():
            if self.config_file is not None:
                logger.debug(f"Settings file {self.config_file} not found, using defaults")
            return AppSettings()

        try:
            data = json.loads(self.config_file.read_text(encoding='utf-8'))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read settings file {self.config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Settings file {self.config_file} must contain a JSON object")

        try:
            settings = AppSettings(**data)
        except ValidationError as e:
            raise ConfigError(f"Invalid settings in {self.config_file}: {e}") from e

        settings.source_path = str(self.config_file)
        logger.debug(f"Loaded settings from {self.config_file}")
        return settings

    def save_settings(self, settings: AppSettings) -> Path:
        """Write settings to the config file.

        Raises:
            ConfigError: If no config file was given
        """
        if self.config_file is None:
            raise ConfigError("No settings file path given")
        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        self.config_file.write_text(
            settings.model_dump_json(indent=2, exclude={'source_path'}),
            encoding='utf-8'
        )
        logger.info(f"Saved settings to {self.config_file}")
        return self.config_file
