"""Access token resolution for publish tasks.

This package provides:
- Feed identity parsing for 'project/feed' inputs
- Per-tool environment token sources
- The resolver that chains service connection, environment and system token

Example usage:

    from packaging_common.credentials import AccessTokenResolver
    from packaging_common.enums import PackageToolType
    from packaging_common.host import EnvironmentTaskHost

    resolver = AccessTokenResolver(EnvironmentTaskHost())
    token = resolver.resolve("internal", "externalEndpoint", "feedPublish", PackageToolType.NUGET)
"""

from .environment_sources import (
    ENVIRONMENT_SOURCES,
    NuGetEndpointsSource,
    UniversalPublishTokenSource,
    UnsupportedToolSource,
    source_for_tool,
)
from .feeds import feed_identity_from_input, resolve_feed_identity
from .resolver import AccessTokenResolver, resolve_access_token
from .source import TokenSource

__all__ = [
    # Sources
    "TokenSource",
    "NuGetEndpointsSource",
    "UniversalPublishTokenSource",
    "UnsupportedToolSource",
    "ENVIRONMENT_SOURCES",
    "source_for_tool",
    # Feeds
    "resolve_feed_identity",
    "feed_identity_from_input",
    # Resolver
    "AccessTokenResolver",
    "resolve_access_token",
]
