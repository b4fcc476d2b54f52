"""Tests for configuration management."""

import json

from moveit_cli.config import Config, ConfigManager, get_config_manager


def _write_profile(manager: ConfigManager, data: dict) -> None:
    manager.config_file.write_text(json.dumps(data))


def test_default_config():
    config = Config()
    assert config.timer.tick_interval_ms == 100
    assert config.timer.max_bar_width == 80
    assert config.timer.bar_margin == 20
    assert config.timer.quit_key == "q"
    assert config.notifications.enabled is True
    assert config.notifications.strict is False
    assert config.notifications.subtitle == "Workout Timer"
    assert config.notifications.sound == "Glass"


def test_config_file_lives_in_config_dir(isolated_dirs):
    manager = ConfigManager(profile="test")
    assert manager.config_file == isolated_dirs / "config" / "test.json"
    assert manager.config_dir.is_dir()


def test_missing_file_gives_defaults():
    assert ConfigManager(profile="fresh").config == Config()


def test_loads_values_from_profile_file():
    manager = ConfigManager(profile="test")
    _write_profile(manager, {"timer": {"max_bar_width": 60}})

    config = ConfigManager(profile="test").config
    assert config.timer.max_bar_width == 60
    assert config.timer.bar_margin == 20


def test_config_is_cached():
    manager = ConfigManager()
    first = manager.config
    _write_profile(manager, {"notifications": {"strict": True}})
    assert manager.config is first


def test_profiles_are_separate():
    _write_profile(get_config_manager("a"), {"notifications": {"strict": True}})
    assert get_config_manager("a").config.notifications.strict is True
    assert get_config_manager("b").config.notifications.strict is False


def test_corrupted_config_falls_back_to_defaults():
    manager = ConfigManager(profile="broken")
    manager.config_file.write_text("{not json")
    assert manager.load_config() == Config()


def test_invalid_values_fall_back_to_defaults():
    manager = ConfigManager(profile="invalid")
    _write_profile(manager, {"timer": {"tick_interval_ms": 0, "quit_key": "quit"}})
    assert manager.load_config() == Config()
