"""Task host backed by the environment a pipeline agent prepares for a task.

The agent exposes everything a task needs as environment variables:

- task inputs as ``INPUT_<NAME>``
- pipeline variables with dots and spaces turned into underscores
  (``Agent.TempDirectory`` -> ``AGENT_TEMPDIRECTORY``)
- service connections as ``ENDPOINT_AUTH_<NAME>`` (JSON with ``scheme`` and
  ``parameters``), or as ``ENDPOINT_AUTH_SCHEME_<NAME>`` plus one
  ``ENDPOINT_AUTH_PARAMETER_<NAME>_<KEY>`` per parameter
- the system connection as the ``SYSTEMVSSCONNECTION`` endpoint

Example:
    >>> host = EnvironmentTaskHost()
    >>> host.get_variable("Agent.TempDirectory")
    '/home/vsts/work/_temp'
"""

from __future__ import annotations

import json
import os
import sys
from collections.abc import Mapping
from typing import TextIO

import structlog

from packaging_common.enums import LogType
from packaging_common.exceptions import CredentialFormatError, EndpointNotFoundError
from packaging_common.models import EndpointAuthorization

log = structlog.get_logger(__name__)

SYSTEM_CONNECTION = "SYSTEMVSSCONNECTION"
_PARAMETER_PREFIX = "ENDPOINT_AUTH_PARAMETER_"


def _escape_command_data(value: str) -> str:
    return value.replace("%", "%AZP25").replace("\r", "%0D").replace("\n", "%0A")


class EnvironmentTaskHost:
    """TaskHost reading the agent's environment variables.

    Args:
        environ: Mapping to read from; defaults to ``os.environ``
        emit_logging_commands: Also write ``##vso[...]`` logging commands so
            warnings and errors show up in the pipeline summary
        stream: Where logging commands are written; defaults to stdout
    """

    def __init__(
        self,
        environ: Mapping[str, str] | None = None,
        emit_logging_commands: bool = False,
        stream: TextIO | None = None,
    ) -> None:
        self._environ = environ if environ is not None else os.environ
        self.emit_logging_commands = emit_logging_commands
        self._stream = stream

    def get_input(self, key: str) -> str | None:
        value = self._environ.get("INPUT_" + key.replace(" ", "_").upper())
        return value.strip() if value is not None else None

    def get_variable(self, key: str) -> str | None:
        value = self._environ.get(key.replace(".", "_").replace(" ", "_").upper())
        return value.strip() if value is not None else None

    def read_env_var(self, name: str) -> str | None:
        return self._environ.get(name)

    def get_endpoint_authorization_scheme(self, name: str, required: bool) -> str:
        authorization = self.get_endpoint_authorization(name, required)
        return authorization.scheme if authorization is not None else ""

    def get_endpoint_authorization(self, name: str, required: bool) -> EndpointAuthorization | None:
        key = name.upper()
        raw = self._environ.get(f"ENDPOINT_AUTH_{key}")
        if raw:
            return self._parse_authorization(name, raw)

        scheme = self._environ.get(f"ENDPOINT_AUTH_SCHEME_{key}")
        if scheme is not None:
            prefix = f"{_PARAMETER_PREFIX}{key}_"
            parameters = {
                var[len(prefix) :].lower(): value for var, value in self._environ.items() if var.startswith(prefix)
            }
            return EndpointAuthorization(scheme=scheme, parameters=parameters)

        if required:
            raise EndpointNotFoundError(
                "Service connection is not configured",
                reference=name,
                suggestion="Check the service connection name in the task inputs",
            )
        log.debug("endpoint_not_found", endpoint=name)
        return None

    def get_system_access_token(self) -> str:
        authorization = self.get_endpoint_authorization(SYSTEM_CONNECTION, False)
        if authorization is not None and authorization.scheme.lower() == "oauth":
            token = authorization.parameters.get("accesstoken", "")
            if token:
                return token

        token = self.get_variable("System.AccessToken")
        if token:
            return token

        self.log("Could not determine credentials to use for the system access token", LogType.WARNING)
        return ""

    def log(self, message: str, log_type: LogType) -> None:
        if log_type == LogType.WARNING:
            log.warning(message)
        elif log_type == LogType.ERROR:
            log.error(message)
        else:
            log.debug(message)

        if self.emit_logging_commands:
            stream = self._stream or sys.stdout
            data = _escape_command_data(message)
            if log_type == LogType.DEBUG:
                stream.write(f"##vso[task.debug]{data}\n")
            else:
                stream.write(f"##vso[task.logissue type={log_type.value};]{data}\n")

    @staticmethod
    def _parse_authorization(name: str, raw: str) -> EndpointAuthorization:
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise CredentialFormatError(
                f"Service connection authorization is not valid JSON: {e}",
                reference=name,
            ) from e

        if not isinstance(payload, dict):
            raise CredentialFormatError("Service connection authorization must be a JSON object", reference=name)

        parameters = payload.get("parameters") or {}
        if not isinstance(parameters, dict):
            raise CredentialFormatError("Service connection parameters must be a JSON object", reference=name)

        return EndpointAuthorization(
            scheme=str(payload.get("scheme") or ""),
            parameters={str(k).lower(): "" if v is None else str(v) for k, v in parameters.items()},
        )
