"""
Tests for configuration settings.

Modified: 2026-10-18
"""

import pytest
import yaml
from pathlib import Path

from rota.config.settings import (
    Settings,
    UISettings,
    KeySettings,
    LoggingSettings,
    get_config_dir,
)
from rota.core.exceptions import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of these tests."""
    for name in ("ROTA_LOG_LEVEL", "ROTA_LOG_FILE", "ROTA_THEME", "XDG_CONFIG_HOME"):
        monkeypatch.delenv(name, raising=False)


def write_config(path: Path, data) -> Path:
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


class TestSettings:
    """Test Settings class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        settings = Settings()

        assert settings.ui.list_width == 60
        assert settings.ui.date_format == "%Y-%m-%d %H:%M:%S"
        assert settings.ui.relative_time is True
        assert settings.ui.theme is None
        assert settings.keys.bindings == {}
        assert settings.logging.level == "WARNING"
        assert settings.logging.file is None

    def test_load_from_file(self, tmp_path):
        """Test loading settings from YAML file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "ui": {"list_width": 50, "relative_time": False, "theme": "nord"},
            "keys": {"quit": ["x"], "refresh": "f5"},
            "logging": {"level": "debug", "file": "/tmp/rota.log"},
        })

        settings = Settings.load(config_file)

        assert settings.ui.list_width == 50
        assert settings.ui.relative_time is False
        assert settings.ui.theme == "nord"
        assert settings.keys.bindings == {"quit": ["x"], "refresh": ["f5"]}
        assert settings.logging.level == "DEBUG"
        assert settings.logging.file == "/tmp/rota.log"

    def test_load_with_missing_file(self):
        """Test loading with non-existent config file."""
        settings = Settings.load(Path("/nonexistent/config.yaml"))

        assert settings.ui.list_width == 60
        assert settings.logging.level == "WARNING"

    def test_empty_file_gives_defaults(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert Settings.load(config_file).ui.list_width == 60

    def test_environment_variable_override(self, monkeypatch, tmp_path):
        """Test that environment variables override config file."""
        config_file = write_config(tmp_path / "config.yaml", {
            "ui": {"theme": "nord"},
            "logging": {"level": "INFO"},
        })

        monkeypatch.setenv("ROTA_THEME", "gruvbox")
        monkeypatch.setenv("ROTA_LOG_LEVEL", "error")
        monkeypatch.setenv("ROTA_LOG_FILE", "/var/tmp/rota.log")

        settings = Settings.load(config_file)

        assert settings.ui.theme == "gruvbox"
        assert settings.logging.level == "ERROR"
        assert settings.logging.file == "/var/tmp/rota.log"

    def test_malformed_yaml(self, tmp_path):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("ui: [unclosed\n")

        with pytest.raises(ConfigurationError):
            Settings.load(config_file)

    def test_top_level_must_be_mapping(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", ["a", "b"])

        with pytest.raises(ConfigurationError, match="mapping"):
            Settings.load(config_file)

    @pytest.mark.parametrize("width", [10, 95, "wide"])
    def test_list_width_range(self, tmp_path, width):
        config_file = write_config(tmp_path / "config.yaml", {"ui": {"list_width": width}})

        with pytest.raises(ConfigurationError, match="list_width"):
            Settings.load(config_file)

    def test_bad_log_level(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"logging": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError, match="logging.level"):
            Settings.load(config_file)

    @pytest.mark.parametrize("section", ["ui", "logging"])
    def test_section_must_be_mapping(self, tmp_path, section):
        config_file = write_config(tmp_path / "config.yaml", {section: "debug"})

        with pytest.raises(ConfigurationError, match=f"'{section}' must be a mapping"):
            Settings.load(config_file)

    @pytest.mark.parametrize("ui, field", [
        ({"date_format": 5}, "ui.date_format"),
        ({"relative_time": "no"}, "ui.relative_time"),
        ({"theme": ["nord"]}, "ui.theme"),
    ])
    def test_ui_value_types(self, tmp_path, ui, field):
        config_file = write_config(tmp_path / "config.yaml", {"ui": ui})

        with pytest.raises(ConfigurationError, match=field):
            Settings.load(config_file)

    def test_log_file_must_be_path(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"logging": {"file": 42}})

        with pytest.raises(ConfigurationError, match="logging.file"):
            Settings.load(config_file)

    def test_bad_key_list(self, tmp_path):
        config_file = write_config(tmp_path / "config.yaml", {"keys": {"quit": []}})

        with pytest.raises(ConfigurationError, match="keys.quit"):
            Settings.load(config_file)

    def test_to_dict(self):
        """Test converting settings to dictionary."""
        settings = Settings(keys=KeySettings(bindings={"quit": ["x"]}))
        settings_dict = settings.to_dict()

        assert set(settings_dict) == {"ui", "keys", "logging"}
        assert settings_dict["ui"]["list_width"] == 60
        assert settings_dict["keys"] == {"quit": ["x"]}
        assert settings_dict["logging"]["level"] == "WARNING"

    def test_get_config_dir(self, monkeypatch, tmp_path):
        """Config directory honours XDG_CONFIG_HOME and is not created."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        config_dir = get_config_dir()

        assert config_dir == tmp_path / "rota"
        assert not config_dir.exists()

    def test_default_config_path_under_home(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        write_config(
            _mkdir(tmp_path / ".config" / "rota") / "config.yaml",
            {"ui": {"list_width": 40}},
        )

        assert Settings.load().ui.list_width == 40


def _mkdir(path: Path) -> Path:
    path.mkdir(parents=True)
    return path


class TestIndividualSettings:
    """Test individual settings dataclasses."""

    def test_ui_settings(self):
        settings = UISettings(list_width=30, theme="monokai")

        assert settings.list_width == 30
        assert settings.theme == "monokai"
        assert settings.relative_time is True

    def test_logging_settings(self):
        settings = LoggingSettings(level="DEBUG", file="rota.log")

        assert settings.level == "DEBUG"
        assert settings.file == "rota.log"
