"""Tests for packaging_common/config/settings.py.

Tests cover:
- Defaults matching the agent conventions
- Overrides from PACKAGING_* environment variables
- Field validation
- Loading from YAML with environment variable interpolation
"""

import pytest
from pydantic import ValidationError

from packaging_common.config.settings import PackagingSettings
from packaging_common.exceptions import ConfigurationError


class TestDefaults:
    """Test default settings."""

    def test_agent_conventions(self):
        """Defaults should match the pipeline agent."""
        settings = PackagingSettings()

        assert settings.nuget_endpoints_variable == "VSS_NUGET_EXTERNAL_FEED_ENDPOINTS"
        assert settings.universal_token_variable == "UNIVERSAL_PUBLISH_PAT"
        assert settings.build_directory_variable == "Agent.BuildDirectory"
        assert settings.temp_directory_variable == "Agent.TempDirectory"
        assert settings.temp_subdirectory == "npm"
        assert settings.config_extension == ".npmrc"
        assert settings.internal_feed_type == "internal"

    def test_environment_override(self, monkeypatch):
        """PACKAGING_* variables should override defaults."""
        monkeypatch.setenv("PACKAGING_TEMP_SUBDIRECTORY", "npmrc")
        monkeypatch.setenv("PACKAGING_LOG_LEVEL", "DEBUG")

        settings = PackagingSettings()

        assert settings.temp_subdirectory == "npmrc"
        assert settings.log_level == "DEBUG"


class TestValidation:
    """Test field validators."""

    def test_extension_gets_leading_dot(self):
        """Should prefix the extension with a dot."""
        assert PackagingSettings(config_extension="npmrc").config_extension == ".npmrc"

    @pytest.mark.parametrize("value", ["", "a/b", "..", "a\\b"])
    def test_subdirectory_must_be_single_component(self, value):
        """Should reject nested or empty backup folder names."""
        with pytest.raises(ValidationError):
            PackagingSettings(temp_subdirectory=value)


class TestFromYaml:
    """Test YAML loading."""

    def test_load(self, tmp_path):
        """Should load values from YAML."""
        config = tmp_path / "packaging.yaml"
        config.write_text("temp_subdirectory: backups\nconfig_extension: .npmrc.bak\n")

        settings = PackagingSettings.from_yaml(str(config))

        assert settings.temp_subdirectory == "backups"
        assert settings.config_extension == ".npmrc.bak"

    def test_empty_file_uses_defaults(self, tmp_path):
        """An empty YAML file should give default settings."""
        config = tmp_path / "packaging.yaml"
        config.write_text("")

        assert PackagingSettings.from_yaml(str(config)).temp_subdirectory == "npm"

    def test_interpolation(self, tmp_path, monkeypatch):
        """Should substitute ${VAR} and ${VAR:-default}."""
        monkeypatch.setenv("PUBLISH_TOKEN_VAR", "MY_TOKEN")
        monkeypatch.delenv("UNSET_LEVEL", raising=False)
        config = tmp_path / "packaging.yaml"
        config.write_text(
            "universal_token_variable: ${PUBLISH_TOKEN_VAR}\n"
            "log_level: ${UNSET_LEVEL:-WARNING}\n"
        )

        settings = PackagingSettings.from_yaml(str(config))

        assert settings.universal_token_variable == "MY_TOKEN"
        assert settings.log_level == "WARNING"

    def test_missing_file(self, tmp_path):
        """Should raise ConfigurationError for a missing file."""
        with pytest.raises(ConfigurationError, match="not found"):
            PackagingSettings.from_yaml(str(tmp_path / "missing.yaml"))

    def test_unset_variable(self, tmp_path, monkeypatch):
        """Should raise ConfigurationError for an unset required variable."""
        monkeypatch.delenv("DEFINITELY_UNSET_VAR", raising=False)
        config = tmp_path / "packaging.yaml"
        config.write_text("log_level: ${DEFINITELY_UNSET_VAR}\n")

        with pytest.raises(ConfigurationError, match="DEFINITELY_UNSET_VAR"):
            PackagingSettings.from_yaml(str(config))

    def test_invalid_yaml(self, tmp_path):
        """Should raise ConfigurationError for invalid YAML."""
        config = tmp_path / "packaging.yaml"
        config.write_text("key: [unclosed\n")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            PackagingSettings.from_yaml(str(config))

    def test_non_mapping(self, tmp_path):
        """Should reject a YAML list."""
        config = tmp_path / "packaging.yaml"
        config.write_text("- a\n- b\n")

        with pytest.raises(ConfigurationError, match="YAML mapping"):
            PackagingSettings.from_yaml(str(config))

    def test_invalid_value(self, tmp_path):
        """Should wrap validation errors in ConfigurationError."""
        config = tmp_path / "packaging.yaml"
        config.write_text("temp_subdirectory: a/b\n")

        with pytest.raises(ConfigurationError, match="Failed to validate"):
            PackagingSettings.from_yaml(str(config))
