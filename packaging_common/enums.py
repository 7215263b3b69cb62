"""Enumerations for package tool types and log severities."""

from __future__ import annotations

from enum import Enum

# Raw tool names accepted in addition to the member values
_TOOL_ALIASES = {
    "dotnetcorecli": "nuget",
    "nugetcommand": "nuget",
    "universal": "universal-packages",
    "upack": "universal-packages",
}


class PackageToolType(str, Enum):
    """Package tools that publish through a build task.

    The tool decides which environment source is consulted when an
    internal feed has no explicit service connection. NuGet and the
    .NET Core CLI read the same endpoint document, so ``DOTNET_CORE_CLI``
    is an alias of ``NUGET``.

    Example:
        >>> PackageToolType("DotNetCoreCLI") is PackageToolType.NUGET
        True
        >>> PackageToolType("cargo")
        <PackageToolType.UNSUPPORTED: 'unsupported'>
    """

    NUGET = "nuget"
    DOTNET_CORE_CLI = "nuget"
    UNIVERSAL_PACKAGES = "universal-packages"
    NPM = "npm"
    UNSUPPORTED = "unsupported"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def _missing_(cls, value: object) -> PackageToolType:
        if isinstance(value, str):
            normalized = value.strip().lower()
            normalized = _TOOL_ALIASES.get(normalized, normalized)
            for member in cls:
                if member.value == normalized:
                    return member
        return cls.UNSUPPORTED


class LogType(str, Enum):
    """Severity a message is written to the build log with."""

    DEBUG = "debug"
    WARNING = "warning"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value
