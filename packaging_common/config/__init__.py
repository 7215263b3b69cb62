"""Configuration for packaging-common.

Example:
    >>> from packaging_common.config import PackagingSettings
    >>> settings = PackagingSettings.from_yaml("packaging.yaml")
    >>> settings.temp_subdirectory
    'npm'
"""

from packaging_common.config.settings import PackagingSettings

__all__ = ["PackagingSettings"]
