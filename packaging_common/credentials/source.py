"""Protocol for environment token sources."""

from typing import Protocol

from packaging_common.models import FeedReference


class TokenSource(Protocol):
    """Interface of a per-tool environment token source.

    Sources never raise for missing or malformed data: they report it through
    the host log and return an empty string so resolution can fall back to
    the system access token.
    """

    @property
    def name(self) -> str:
        """Source identifier used in log events (e.g., 'nuget-endpoints')."""
        ...

    def get(self, feed: FeedReference) -> str:
        """Return the token for ``feed`` or '' if this source has none."""
        ...
