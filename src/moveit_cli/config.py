"""Configuration management for MoveIt CLI."""

import json
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir
from pydantic import BaseModel, Field


class TimerConfig(BaseModel):
    """Timer and display configuration."""

    tick_interval_ms: int = Field(default=100, gt=0)
    max_bar_width: int = Field(default=80, gt=0)
    bar_margin: int = Field(default=20, ge=0)
    quit_key: str = Field(default="q", min_length=1, max_length=1)
    screen: bool = Field(default=True)


class NotificationConfig(BaseModel):
    """Desktop notification configuration."""

    enabled: bool = Field(default=True)
    strict: bool = Field(default=False)
    subtitle: str = Field(default="Workout Timer")
    sound: str = Field(default="Glass")


class Config(BaseModel):
    """Main configuration."""

    timer: TimerConfig = Field(default_factory=TimerConfig)
    notifications: NotificationConfig = Field(default_factory=NotificationConfig)


class ConfigManager:
    """Manages MoveIt CLI configuration."""

    def __init__(self, profile: str = "default"):
        self.profile = profile
        self.config_dir = Path(user_config_dir("moveit-cli"))
        self.config_file = self.config_dir / f"{profile}.json"

        # Ensure directories exist
        self.config_dir.mkdir(parents=True, exist_ok=True)

        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if self._config is None:
            self._config = self.load_config()
        return self._config

    def load_config(self) -> Config:
        """Load configuration from file."""
        if self.config_file.exists():
            try:
                with open(self.config_file, "r") as f:
                    data = json.load(f)
                return Config(**data)
            except Exception:
                # If config is corrupted, return default
                return Config()
        return Config()


def get_config_manager(profile: str = "default") -> ConfigManager:
    """Get a configuration manager for a profile."""
    return ConfigManager(profile)
