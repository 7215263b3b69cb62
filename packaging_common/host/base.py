"""Protocols describing what a build agent provides to this package."""

from pathlib import Path
from typing import Protocol

from packaging_common.enums import LogType
from packaging_common.models import EndpointAuthorization


class TaskHost(Protocol):
    """Read-only view of the running task's inputs, variables and endpoints.

    The resolver and the config backup never read process-wide state
    directly; everything comes through a host passed to them, which keeps
    them deterministic under test.
    """

    def get_input(self, key: str) -> str | None:
        """Return the task input ``key`` or None if unset."""
        ...

    def get_variable(self, key: str) -> str | None:
        """Return the pipeline variable ``key`` (e.g. 'Agent.TempDirectory')."""
        ...

    def get_endpoint_authorization_scheme(self, name: str, required: bool) -> str:
        """Return the authorization scheme of service connection ``name``.

        Raises:
            EndpointNotFoundError: If ``required`` and the endpoint is unknown
        """
        ...

    def get_endpoint_authorization(self, name: str, required: bool) -> EndpointAuthorization | None:
        """Return the stored authorization of service connection ``name``.

        Raises:
            EndpointNotFoundError: If ``required`` and the endpoint is unknown
        """
        ...

    def get_system_access_token(self) -> str:
        """Return the pipeline-scoped system access token ('' if none)."""
        ...

    def read_env_var(self, name: str) -> str | None:
        """Return environment variable ``name`` or None if unset."""
        ...

    def log(self, message: str, log_type: LogType) -> None:
        """Write ``message`` to the build log at ``log_type``."""
        ...


class FileSystem(Protocol):
    """File operations used by the config backup."""

    def exists(self, path: Path) -> bool: ...

    def make_dirs(self, path: Path) -> None: ...

    def remove(self, path: Path) -> None: ...

    def read_bytes(self, path: Path) -> bytes: ...

    def write_bytes(self, path: Path, content: bytes) -> None: ...
