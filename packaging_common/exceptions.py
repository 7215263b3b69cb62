"""Custom exception hierarchy for packaging-common.

Exception Hierarchy:
    PackagingCommonError (base)
    ├── ConfigurationError
    └── CredentialError
        ├── EndpointNotFoundError
        └── CredentialFormatError

Filesystem failures raised while saving or restoring a configuration file
are not part of this hierarchy: ``OSError`` propagates to the
caller unchanged.

Example Usage:
    >>> from packaging_common.exceptions import ConfigurationError
    >>> try:
    ...     settings = PackagingSettings.from_yaml(path)
    ... except ConfigurationError as e:
    ...     print(e.message)
"""


class PackagingCommonError(Exception):
    """Base exception for all packaging-common errors.

    Attributes:
        message: Human-readable error description
    """

    def __init__(self, message: str) -> None:
        """Initialize exception.

        Args:
            message: Error message
        """
        self.message = message
        super().__init__(message)


class ConfigurationError(PackagingCommonError):
    """Configuration-related errors.

    Examples:
        - Settings file not found or not valid YAML
        - Neither the build nor the temp directory variable is set
        - Invalid setting values
    """

    pass


class CredentialError(PackagingCommonError):
    """Credential-related errors.

    Attributes:
        message: Human-readable error description
        reference: The endpoint or variable that failed (e.g., "MyFeedConnection")
        suggestion: Optional suggestion for resolution
    """

    def __init__(
        self,
        message: str,
        reference: str | None = None,
        suggestion: str | None = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message
            reference: The endpoint or variable that failed
            suggestion: Optional suggestion for resolution
        """
        self.reference = reference
        self.suggestion = suggestion

        full_message = message
        if reference:
            full_message = f"{message} (reference: {reference})"
        if suggestion:
            full_message = f"{full_message}\nSuggestion: {suggestion}"

        super().__init__(full_message)
        # Preserve original message (super sets self.message to full_message)
        self.message = message


class EndpointNotFoundError(CredentialError):
    """A required service connection is not configured on the agent."""

    pass


class CredentialFormatError(CredentialError):
    """Credential data exists but cannot be parsed."""

    pass
