"""
Pagination settings management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger("PaginationHelper.Settings")


class PaginationSettings(BaseModel):
    """Paging and load-more behaviour"""
    page_size: int = Field(
        default=10,
        ge=1,
        le=1000,
        description="Number of items requested per page (1-1000)"
    )
    load_more_threshold: float = Field(
        default=200.0,
        ge=0,
        description="Distance from the end of the list that triggers a load"
    )
    show_loading_indicator: bool = Field(
        default=True,
        description="Reserve a trailing row for the loading indicator"
    )


class Settings(BaseModel):
    """Main settings model"""
    pagination: PaginationSettings = Field(default_factory=PaginationSettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to the bundled settings.yml
        """
        if config_path is None:
            config_path = Path(__file__).parent / "settings.yml"

        self.config_path = Path(config_path)
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.info("Settings file not found at %s, using defaults", self.config_path)
            return Settings()

        try:
            with open(self.config_path, 'r') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error("Error reading settings from %s: %s", self.config_path, e)
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        if not isinstance(config_data, dict):
            logger.error("Settings file %s is not a mapping, using defaults", self.config_path)
            return Settings()

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            logger.error("Invalid settings in %s: %s", self.config_path, e)
            return Settings()

        logger.info("Loaded settings from %s", self.config_path)
        logger.debug("  - Page size: %d", settings.pagination.page_size)
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def page_size(self) -> int:
        return self.settings.pagination.page_size

    @property
    def load_more_threshold(self) -> float:
        return self.settings.pagination.load_more_threshold

    @property
    def show_loading_indicator(self) -> bool:
        return self.settings.pagination.show_loading_indicator

    def update_settings(self, **kwargs):
        """Update settings and save to file

        Keys use dotted paths, e.g. ``update_settings(**{"pagination.page_size": 25})``.
        Raises pydantic.ValidationError if a value is out of range.
        """
        config_data = self.settings.model_dump()
        for key, value in kwargs.items():
            parts = key.split('.')
            section = config_data
            for part in parts[:-1]:
                section = section[part]
            section[parts[-1]] = value

        self.settings = Settings.model_validate(config_data)
        self._save_settings()

    def _save_settings(self):
        """Save current settings to YAML file"""
        config_data = self.settings.model_dump()
        with open(self.config_path, 'w') as f:
            yaml.dump(config_data, f, default_flow_style=False)


# Global settings instance
_settings_manager: Optional[SettingsManager] = None


def get_settings() -> SettingsManager:
    """Get the global settings manager instance"""
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager
