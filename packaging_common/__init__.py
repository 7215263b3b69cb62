"""packaging-common: access tokens and configuration backups for package publish tasks.

Example:
    >>> from packaging_common import AccessTokenResolver, ConfigBackup, EnvironmentTaskHost, PackageToolType
    >>> host = EnvironmentTaskHost()
    >>> backup = ConfigBackup(host)
    >>> backup.backup(".npmrc")
    >>> token = AccessTokenResolver(host).resolve("internal", "externalEndpoint", "publishFeed", PackageToolType.NPM)
    >>> backup.restore(".npmrc")
"""

from packaging_common.config_backup import ConfigBackup
from packaging_common.credentials import AccessTokenResolver, resolve_access_token, resolve_feed_identity
from packaging_common.enums import LogType, PackageToolType
from packaging_common.exceptions import (
    ConfigurationError,
    CredentialError,
    CredentialFormatError,
    EndpointNotFoundError,
    PackagingCommonError,
)
from packaging_common.host import EnvironmentTaskHost, InMemoryTaskHost, LocalFileSystem, TaskHost
from packaging_common.models import EndpointAuthorization, EndpointCredentialEntry, FeedReference
from packaging_common.utils import log_error, to_nerf_dart

__version__ = "0.1.0"

__all__ = [
    "AccessTokenResolver",
    "ConfigBackup",
    "ConfigurationError",
    "CredentialError",
    "CredentialFormatError",
    "EndpointAuthorization",
    "EndpointCredentialEntry",
    "EndpointNotFoundError",
    "EnvironmentTaskHost",
    "FeedReference",
    "InMemoryTaskHost",
    "LocalFileSystem",
    "LogType",
    "PackageToolType",
    "PackagingCommonError",
    "TaskHost",
    "log_error",
    "resolve_access_token",
    "resolve_feed_identity",
    "to_nerf_dart",
]
