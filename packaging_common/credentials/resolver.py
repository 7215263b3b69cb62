"""Access token resolution for package publishing tasks."""

from __future__ import annotations

import structlog

from packaging_common.config.settings import PackagingSettings
from packaging_common.credentials.environment_sources import source_for_tool
from packaging_common.credentials.feeds import feed_identity_from_input
from packaging_common.enums import LogType, PackageToolType
from packaging_common.host.base import TaskHost
from packaging_common.models import FeedReference

log = structlog.get_logger(__name__)


class AccessTokenResolver:
    """Pick the token a publish task authenticates to a feed with.

    Resolution order, each step tried only while no token has been found:

    1. For internal feeds, the service connection named by the endpoint input.
    2. For internal feeds, credentials the agent put in the environment for
       the package tool.
    3. The pipeline's system access token.

    Unsupported schemes, unsupported tools and malformed environment data are
    logged as warnings and resolution moves on; they never fail the task.

    Example:
        >>> resolver = AccessTokenResolver(EnvironmentTaskHost())
        >>> token = resolver.resolve("internal", "externalEndpoint", "feedPublish", PackageToolType.NUGET)
    """

    def __init__(self, host: TaskHost, settings: PackagingSettings | None = None) -> None:
        """Initialize resolver.

        Args:
            host: Source of task inputs, endpoints, environment and logging
            settings: Variable names and conventions; defaults apply if omitted
        """
        self.host = host
        self.settings = settings or PackagingSettings()

    def is_internal(self, feed_type: str | None) -> bool:
        return (feed_type or "").lower() == self.settings.internal_feed_type.lower()

    def resolve(
        self,
        feed_type: str | None,
        endpoint_input_key: str,
        feed_input_key: str,
        package_tool_type: PackageToolType | str,
    ) -> str:
        """Resolve the access token for a publish.

        Args:
            feed_type: Feed type input value; only 'internal' (any case)
                consults the service connection and environment
            endpoint_input_key: Task input naming the service connection
            feed_input_key: Task input holding the 'project/feed' value
            package_tool_type: Tool that publishes (enum member or raw name)

        Returns:
            The first non-empty token in resolution order, else the system
            access token (possibly '' if the agent issued none)

        Raises:
            EndpointNotFoundError: If the endpoint input names a service
                connection the agent does not know
        """
        tool = PackageToolType(package_tool_type)
        token = ""

        if self.is_internal(feed_type):
            endpoint_name = self.host.get_input(endpoint_input_key)
            if endpoint_name:
                self.host.log(f"Checking if the endpoint {endpoint_name} provided by user can be used.", LogType.DEBUG)
                token = self.from_service_connection(endpoint_name)

            if not token:
                self.host.log("Checking if the credentials are set in the environment.", LogType.DEBUG)
                feed = feed_identity_from_input(self.host, feed_input_key)
                token = self.from_environment(feed, tool)

            if not token:
                self.host.log("Access token not set. Using System Access token.", LogType.WARNING)

        if token:
            log.debug("access_token_resolved", feed_type=feed_type, tool=tool.value)
            return token

        log.debug("access_token_from_system", feed_type=feed_type, tool=tool.value)
        return self.host.get_system_access_token()

    def from_service_connection(self, endpoint_name: str) -> str:
        """Return the API token stored in service connection ``endpoint_name``.

        Only the token scheme carries a usable token; other schemes log a
        warning and yield ''. A token scheme without the token parameter
        also yields ''.
        """
        scheme = self.host.get_endpoint_authorization_scheme(endpoint_name, True).lower()
        if scheme != self.settings.token_scheme.lower():
            self.host.log(
                "Unsupported authentication scheme for internal feed; use token-based authentication.",
                LogType.WARNING,
            )
            log.debug("endpoint_scheme_unsupported", endpoint=endpoint_name, scheme=scheme)
            return ""

        authorization = self.host.get_endpoint_authorization(endpoint_name, True)
        if authorization is None:
            return ""
        return _parameter(authorization.parameters, self.settings.token_parameter)

    def from_environment(self, feed: FeedReference, package_tool_type: PackageToolType | str) -> str:
        """Return the token the agent provided in the environment for ``feed``."""
        tool = PackageToolType(package_tool_type)
        source = source_for_tool(tool, self.host, self.settings)
        token = source.get(feed)
        log.debug("environment_source_checked", source=source.name, found=bool(token))
        return token


def _parameter(parameters: dict[str, str], key: str) -> str:
    if key in parameters:
        return parameters[key] or ""
    lowered = key.lower()
    for name, value in parameters.items():
        if name.lower() == lowered:
            return value or ""
    return ""


def resolve_access_token(
    host: TaskHost,
    feed_type: str | None,
    endpoint_input_key: str,
    feed_input_key: str,
    package_tool_type: PackageToolType | str,
    settings: PackagingSettings | None = None,
) -> str:
    """Resolve an access token with a one-off AccessTokenResolver."""
    return AccessTokenResolver(host, settings).resolve(feed_type, endpoint_input_key, feed_input_key, package_tool_type)
