"""
Tests for configuration loading.
"""

import logging
from unittest.mock import patch

import pytest
import yaml
from pydantic import ValidationError

from snaplab.config import (
    Settings,
    SnapshotConfig,
    SystemConfig,
    ThresholdDefaults,
    configure_logging,
    get_settings,
    reload_settings,
)
from snaplab.exceptions import ConfigurationException


class TestSettingsDefaults:
    """Default configuration values"""

    def test_snapshot_defaults(self):
        """Test snapshot settings default to the working resolution"""
        settings = Settings()

        assert settings.snapshot.width == 160
        assert settings.snapshot.height == 120
        assert settings.snapshot.file_stem == "snapshot"

    def test_threshold_defaults_build_params(self):
        """Test threshold defaults convert to ThresholdParams"""
        params = ThresholdDefaults().to_params()

        assert params.red == 128
        assert params.hue_center == 0.0

    def test_get_settings_is_cached(self):
        """Test get_settings returns the cached instance"""
        assert get_settings() is get_settings()

    def test_reload_settings(self):
        """Test reload_settings builds a fresh instance"""
        first = get_settings()
        assert reload_settings() is not first


class TestSettingsValidation:
    """Field validation"""

    def test_log_level_normalized(self):
        """Test log level is upper-cased"""
        assert SystemConfig(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level(self):
        """Test unknown log levels are rejected"""
        with pytest.raises(ValidationError):
            SystemConfig(log_level="LOUD")

    def test_invalid_dimension(self):
        """Test zero width is rejected"""
        with pytest.raises(ValidationError):
            SnapshotConfig(width=0)

    def test_threshold_out_of_range(self):
        """Test threshold defaults are range checked"""
        with pytest.raises(ValidationError):
            ThresholdDefaults(cr=300)


class TestSettingsSources:
    """Environment variables and YAML files"""

    def test_nested_env_override(self, monkeypatch):
        """Test nested env variables override snapshot settings"""
        monkeypatch.setenv("SNAPLAB_SNAPSHOT__WIDTH", "320")

        assert Settings().snapshot.width == 320

    def test_sub_config_env_prefix(self, monkeypatch):
        """Test sub-config reads its own env prefix"""
        monkeypatch.setenv("SNAPLAB_THRESHOLD_RED", "42")

        assert ThresholdDefaults().red == 42

    def test_yaml_file(self, tmp_path):
        """Test values are loaded from a YAML file"""
        config_file = tmp_path / "snaplab.yaml"
        config_file.write_text(
            yaml.dump({"snapshot": {"width": 320, "height": 240}, "thresholds": {"cr": 150}})
        )

        settings = Settings(config_file=str(config_file))

        assert settings.snapshot.width == 320
        assert settings.snapshot.height == 240
        assert settings.thresholds.cr == 150

    def test_yaml_file_from_env(self, tmp_path, monkeypatch):
        """Test the YAML file can be named by env variable"""
        config_file = tmp_path / "snaplab.yaml"
        config_file.write_text(yaml.dump({"system": {"log_level": "warning"}}))
        monkeypatch.setenv("SNAPLAB_CONFIG_FILE", str(config_file))

        assert Settings().system.log_level == "WARNING"

    def test_missing_yaml_file_ignored(self, tmp_path):
        """Test a missing YAML file falls back to defaults"""
        settings = Settings(config_file=str(tmp_path / "absent.yaml"))
        assert settings.snapshot.width == 160

    def test_yaml_must_be_mapping(self, tmp_path):
        """Test a non-mapping YAML root is a configuration error"""
        config_file = tmp_path / "list.yaml"
        config_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationException):
            Settings(config_file=str(config_file))

    def test_save_and_reload(self, tmp_path):
        """Test settings survive a save and reload through YAML"""
        settings = Settings(snapshot={"width": 200, "height": 100, "save_dir": "out"})
        path = tmp_path / "saved.yaml"

        settings.save_to_file(str(path))
        loaded = Settings(config_file=str(path))

        assert "config_file" not in yaml.safe_load(path.read_text())
        assert loaded.snapshot.width == 200
        assert loaded.snapshot.save_dir == "out"


class TestConfigureLogging:
    """Logging setup from settings"""

    def test_uses_log_level(self):
        """Test logging level follows the configured log level"""
        settings = Settings(system={"log_level": "ERROR"})

        with patch("snaplab.config.logging.basicConfig") as basic_config:
            configure_logging(settings)

        assert basic_config.call_args.kwargs["level"] == logging.ERROR

    def test_debug_flag_overrides_level(self):
        """Test debug mode forces DEBUG logging"""
        settings = Settings(system={"debug": True, "log_level": "WARNING"})

        with patch("snaplab.config.logging.basicConfig") as basic_config:
            configure_logging(settings)

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
