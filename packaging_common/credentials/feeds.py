"""Parsing of ``project/feed`` task inputs."""

from packaging_common.host.base import TaskHost
from packaging_common.models import FeedReference


def resolve_feed_identity(raw: str | None) -> FeedReference:
    """Split a ``project/feed`` or ``feed`` value into a FeedReference.

    Only the first two ``/``-separated segments are used, so
    ``"proj/feed/extra"`` yields project ``proj`` and feed ``feed``; feed or
    project names containing ``/`` cannot be expressed.

    Example:
        >>> resolve_feed_identity("MyProject/MyFeed")
        FeedReference(feed_id='MyFeed', project_id='MyProject')
        >>> resolve_feed_identity("MyFeed")
        FeedReference(feed_id='MyFeed', project_id=None)
        >>> resolve_feed_identity("/MyFeed")
        FeedReference(feed_id='MyFeed', project_id=None)
    """
    if not raw or "/" not in raw:
        return FeedReference(feed_id=raw, project_id=None)

    parts = raw.split("/")
    return FeedReference(feed_id=parts[1], project_id=parts[0] or None)


def feed_identity_from_input(host: TaskHost, input_key: str) -> FeedReference:
    """Read task input ``input_key`` and parse it as a feed reference."""
    return resolve_feed_identity(host.get_input(input_key))
