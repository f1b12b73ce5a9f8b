"""Configuration management for the adstxt command line."""

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ValidationError


class ConfigError(Exception):
    """Settings file exists but cannot be used."""


class Settings(BaseModel):
    """User settings read from settings.yaml. CLI flags take precedence."""

    output_format: Literal["rich", "plain", "json", "yaml"] = "rich"
    strict: bool = False
    show_comments: bool = True
    fail_on_duplicates: bool = False


class ConfigManager:
    """Loads settings stored in YAML format."""

    SETTINGS_FILENAME = "settings.yaml"

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("ADSTXT_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.adstxt
                config_dir = Path.home() / ".adstxt"

        self.config_dir = config_dir
        self.settings_file = config_dir / self.SETTINGS_FILENAME

    def _load_raw(self) -> dict[str, Any]:
        """Load the raw mapping from the YAML file."""
        if not self.settings_file.exists():
            return {}

        try:
            with open(self.settings_file, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"{self.settings_file}: invalid YAML: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.settings_file}: expected a mapping at top level")
        return data

    def load(self) -> Settings:
        """Return validated settings, or defaults if no file exists."""
        try:
            return Settings(**self._load_raw())
        except ValidationError as e:
            raise ConfigError(f"{self.settings_file}: {e}") from e

    def save(self, settings: Settings) -> None:
        """Write settings back to the YAML file."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.settings_file, "w") as f:
            yaml.safe_dump(settings.model_dump(), f, sort_keys=False)
