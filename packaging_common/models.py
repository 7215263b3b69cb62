"""
Data models for feed identity and endpoint credentials.

``FeedReference`` and ``EndpointAuthorization`` are plain value objects built
by this package. ``EndpointCredentialEntry`` and ``EndpointCredentialsDocument``
mirror the JSON document the build agent injects for NuGet-style tools and
are parsed with Pydantic. A document with the wrong outer shape raises
``ValidationError``; an incomplete entry is skipped on its own.

Example:
    Parsing the agent's endpoint document::

        document = EndpointCredentialsDocument.model_validate_json(
            '{"endpointCredentials": [{"endpoint": "https://pkgs.example/feedA",'
            ' "password": "tok1"}]}'
        )
        document.find_by_feed("feedA").password  # "tok1"
"""

from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class FeedReference:
    """A feed and the project that owns it.

    Attributes:
        feed_id: Feed name or id; ``None`` only when no feed was supplied
        project_id: Owning project, ``None`` for organization-scoped feeds
    """

    feed_id: str | None
    project_id: str | None = None


@dataclass(frozen=True)
class EndpointAuthorization:
    """Stored authorization of a named service connection."""

    scheme: str
    parameters: dict[str, str] = field(default_factory=dict)


class EndpointCredentialEntry(BaseModel):
    """One feed endpoint and the credentials the agent issued for it."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    username: str | None = None
    password: str


class EndpointCredentialsDocument(BaseModel):
    """The ``{"endpointCredentials": [...]}`` document injected by the agent.

    Only the outer shape is checked when the document is parsed. Entries are
    validated one at a time by ``entries``, so one incomplete entry does not
    hide the others.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    endpoint_credentials: list[Any] = Field(..., alias="endpointCredentials")

    def entries(self) -> list[EndpointCredentialEntry]:
        """Return the well-formed entries in document order, skipping the rest."""
        valid = []
        for index, raw in enumerate(self.endpoint_credentials):
            try:
                valid.append(EndpointCredentialEntry.model_validate(raw))
            except ValidationError as e:
                log.debug("endpoint_entry_skipped", index=index, locations=[err["loc"] for err in e.errors()])
        return valid

    def find_by_feed(self, feed_id: str) -> EndpointCredentialEntry | None:
        """Return the first entry whose endpoint contains ``feed_id``.

        The match is a case-sensitive substring search over the endpoint URL,
        in document order.
        """
        for entry in self.entries():
            if feed_id in entry.endpoint:
                return entry
        return None
