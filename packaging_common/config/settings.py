"""
Configuration system using Pydantic for type-safe settings management.

Every name this package reads from the agent (environment variables, pipeline
variables, file naming conventions) is a setting, so a host with different
conventions can override them through ``PACKAGING_*`` environment variables or
a YAML file.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from packaging_common.exceptions import ConfigurationError


class PackagingSettings(BaseSettings):
    """Names and conventions used for token resolution and config backup."""

    model_config = SettingsConfigDict(
        env_prefix="PACKAGING_",
        case_sensitive=False,
    )

    nuget_endpoints_variable: str = Field(
        default="VSS_NUGET_EXTERNAL_FEED_ENDPOINTS",
        description="Environment variable holding the NuGet endpoint credentials JSON document",
    )
    universal_token_variable: str = Field(
        default="UNIVERSAL_PUBLISH_PAT",
        description="Environment variable holding the Universal Packages publish token",
    )
    build_directory_variable: str = Field(
        default="Agent.BuildDirectory", description="Pipeline variable for the agent build directory"
    )
    temp_directory_variable: str = Field(
        default="Agent.TempDirectory", description="Pipeline variable used when no build directory is set"
    )
    temp_subdirectory: str = Field(default="npm", description="Folder under the agent directory holding backups")
    config_extension: str = Field(default=".npmrc", description="Suffix of named configuration backups")
    internal_feed_type: str = Field(default="internal", description="Feed type value that marks an internal feed")
    token_scheme: str = Field(default="token", description="Service connection scheme carrying an API token")
    token_parameter: str = Field(default="apitoken", description="Authorization parameter holding the API token")
    log_level: str = Field(default="INFO", description="Minimum structlog level")

    @field_validator("config_extension")
    @classmethod
    def ensure_leading_dot(cls, value: str) -> str:
        """Accept ``npmrc`` as shorthand for ``.npmrc``."""
        if value and not value.startswith("."):
            return f".{value}"
        return value

    @field_validator("temp_subdirectory")
    @classmethod
    def reject_nested_subdirectory(cls, value: str) -> str:
        """The backup folder must be a single path component."""
        if not value or "/" in value or "\\" in value or value in (".", ".."):
            raise ValueError(f"temp_subdirectory must be a single folder name, got: {value!r}")
        return value

    @classmethod
    def from_yaml(cls, config_path: str) -> PackagingSettings:
        """Load settings from a YAML file.

        ``${VAR}`` is replaced by the environment variable ``VAR`` and
        ``${VAR:-fallback}`` uses ``fallback`` when ``VAR`` is unset. Fields
        missing from the file keep their ``PACKAGING_*`` or default values.

        Raises:
            ConfigurationError: If the file is missing, references an unset
                variable, is not a YAML mapping, or holds invalid values
        """
        config_file = Path(config_path)
        if not config_file.is_file():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            content = _ENV_REFERENCE.sub(_expand_env_reference, config_file.read_text())
            values = yaml.safe_load(content) or {}
        except KeyError as e:
            raise ConfigurationError(f"Environment variable {e.args[0]} referenced in {config_path} is not set") from e
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if not isinstance(values, dict):
            raise ConfigurationError(f"{config_path} must hold a YAML mapping of setting names to values")

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Failed to validate configuration in {config_path}: {e}") from e


_ENV_REFERENCE = re.compile(r"\$\{([A-Z_][A-Z0-9_]*)(?::-([^}]*))?\}")


def _expand_env_reference(match: re.Match[str]) -> str:
    name, fallback = match.group(1), match.group(2)
    value = os.environ.get(name, fallback)
    if value is None:
        raise KeyError(name)
    return value
