"""In-memory task host for tests and for embedding in other tools."""

from dataclasses import dataclass, field

from packaging_common.enums import LogType
from packaging_common.exceptions import EndpointNotFoundError
from packaging_common.models import EndpointAuthorization


@dataclass
class InMemoryTaskHost:
    """TaskHost whose inputs, variables and endpoints are plain dicts.

    Every message passed to ``log`` is kept in ``messages`` so tests can
    assert on warnings.

    Example:
        >>> host = InMemoryTaskHost(
        ...     inputs={"externalEndpoint": "MyFeed"},
        ...     endpoints={"MyFeed": EndpointAuthorization("Token", {"apitoken": "abc"})},
        ... )
        >>> host.get_endpoint_authorization("MyFeed", True).parameters["apitoken"]
        'abc'
    """

    inputs: dict[str, str] = field(default_factory=dict)
    variables: dict[str, str] = field(default_factory=dict)
    endpoints: dict[str, EndpointAuthorization] = field(default_factory=dict)
    environ: dict[str, str] = field(default_factory=dict)
    system_access_token: str = ""
    messages: list[tuple[LogType, str]] = field(default_factory=list)

    def get_input(self, key: str) -> str | None:
        return self.inputs.get(key)

    def get_variable(self, key: str) -> str | None:
        return self.variables.get(key)

    def read_env_var(self, name: str) -> str | None:
        return self.environ.get(name)

    def get_endpoint_authorization_scheme(self, name: str, required: bool) -> str:
        authorization = self.get_endpoint_authorization(name, required)
        return authorization.scheme if authorization is not None else ""

    def get_endpoint_authorization(self, name: str, required: bool) -> EndpointAuthorization | None:
        authorization = self.endpoints.get(name)
        if authorization is None and required:
            raise EndpointNotFoundError("Service connection is not configured", reference=name)
        return authorization

    def get_system_access_token(self) -> str:
        return self.system_access_token

    def log(self, message: str, log_type: LogType) -> None:
        self.messages.append((log_type, message))

    def warnings(self) -> list[str]:
        """Return the messages logged at warning level, in order."""
        return [message for log_type, message in self.messages if log_type == LogType.WARNING]
