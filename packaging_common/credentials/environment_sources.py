"""Environment token sources, one per package tool type.

NuGet-style tools receive a JSON document listing every feed endpoint the
pipeline is authorized for; Universal Packages receives a single publish
token. npm has no environment source.
"""

from __future__ import annotations

from collections.abc import Callable

import structlog
from pydantic import ValidationError

from packaging_common.config.settings import PackagingSettings
from packaging_common.credentials.source import TokenSource
from packaging_common.enums import LogType, PackageToolType
from packaging_common.host.base import TaskHost
from packaging_common.models import EndpointCredentialsDocument, FeedReference

log = structlog.get_logger(__name__)


class NuGetEndpointsSource:
    """Token from the agent's NuGet endpoint credentials document.

    Example:
        >>> host = InMemoryTaskHost(environ={
        ...     "VSS_NUGET_EXTERNAL_FEED_ENDPOINTS":
        ...         '{"endpointCredentials": [{"endpoint": "https://pkgs.example/feedA", "password": "tok1"}]}'
        ... })
        >>> NuGetEndpointsSource(host).get(FeedReference("feedA"))
        'tok1'
    """

    def __init__(self, host: TaskHost, settings: PackagingSettings | None = None) -> None:
        self.host = host
        self.settings = settings or PackagingSettings()

    @property
    def name(self) -> str:
        return "nuget-endpoints"

    def load(self) -> EndpointCredentialsDocument | None:
        """Parse the endpoint document, or None if it is unset or malformed."""
        variable = self.settings.nuget_endpoints_variable
        raw = self.host.read_env_var(variable)
        if not raw:
            self.host.log(f"No endpoint credentials found in {variable}", LogType.DEBUG)
            return None

        try:
            document = EndpointCredentialsDocument.model_validate_json(raw)
        except ValidationError as e:
            self.host.log(
                f"Ignoring malformed endpoint credentials in {variable}: {e.error_count()} error(s)",
                LogType.WARNING,
            )
            log.debug("endpoint_document_invalid", variable=variable, locations=[err["loc"] for err in e.errors()])
            return None

        log.debug("endpoint_document_loaded", variable=variable, entries=len(document.endpoint_credentials))
        return document

    def get(self, feed: FeedReference) -> str:
        if not feed.feed_id:
            self.host.log("No feed given; endpoint credentials cannot be matched", LogType.DEBUG)
            return ""

        document = self.load()
        if document is None:
            return ""

        self.host.log(f"Feed details {feed.feed_id} {feed.project_id}", LogType.DEBUG)
        entry = document.find_by_feed(feed.feed_id)
        if entry is None:
            self.host.log(f"No endpoint credentials found for {feed.feed_id}", LogType.DEBUG)
            return ""

        self.host.log(f"Endpoint credentials found for {feed.feed_id}", LogType.DEBUG)
        return entry.password


class UniversalPublishTokenSource:
    """Token from the Universal Packages publish variable."""

    def __init__(self, host: TaskHost, settings: PackagingSettings | None = None) -> None:
        self.host = host
        self.settings = settings or PackagingSettings()

    @property
    def name(self) -> str:
        return "universal-publish-token"

    def get(self, feed: FeedReference) -> str:
        return self.host.read_env_var(self.settings.universal_token_variable) or ""


class UnsupportedToolSource:
    """Placeholder for tools without an environment source."""

    def __init__(self, host: TaskHost, tool: PackageToolType) -> None:
        self.host = host
        self.tool = tool

    @property
    def name(self) -> str:
        return f"unsupported:{self.tool.value}"

    def get(self, feed: FeedReference) -> str:
        self.host.log(
            f"Package tool type '{self.tool.value}' is not supported for reading a token from the environment",
            LogType.WARNING,
        )
        return ""


SourceFactory = Callable[[TaskHost, PackagingSettings], TokenSource]

# Adding a tool with an environment source is one entry here
ENVIRONMENT_SOURCES: dict[PackageToolType, SourceFactory] = {
    PackageToolType.NUGET: NuGetEndpointsSource,
    PackageToolType.UNIVERSAL_PACKAGES: UniversalPublishTokenSource,
}


def source_for_tool(tool: PackageToolType, host: TaskHost, settings: PackagingSettings | None = None) -> TokenSource:
    """Return the environment token source registered for ``tool``."""
    factory = ENVIRONMENT_SOURCES.get(tool)
    if factory is None:
        return UnsupportedToolSource(host, tool)
    return factory(host, settings or PackagingSettings())
