"""Domain exceptions for configuration loading.

The hierarchy separates failures reading the source file, structural
decode failures, rule violations found by the validator, and misuse of
an accessor built from an unvalidated tree. File open and stat failures
are not wrapped; they surface as ``OSError``.
"""

from typing import ClassVar


class ConfigError(Exception):
    """Base exception for all configuration errors.

    Attributes:
        message: Human-readable error message.
        location: Dotted path of the offending field, or a coarse area
            such as ``file`` when no single field is at fault.
    """

    error_type: ClassVar[str] = "config_error"

    def __init__(self, message: str, location: str = "config") -> None:
        """Initialize the error.

        Args:
            message: Human-readable error message.
            location: Dotted path of the offending field.
        """
        super().__init__(message)
        self.message = message
        self.location = location

    def to_dict(self) -> dict[str, str]:
        """Convert the error to a loader error record."""
        return {
            "loc": self.location,
            "msg": self.message,
            "type": self.error_type,
        }


class ConfigTooLargeError(ConfigError):
    """Raised when the config file exceeds the size ceiling."""

    error_type: ClassVar[str] = "config_too_large"

    def __init__(self, path: str, size: int, limit: int) -> None:
        """Initialize the error.

        Args:
            path: Path of the config file.
            size: Reported file size in bytes.
            limit: Maximum accepted size in bytes.
        """
        self.path = path
        self.size = size
        self.limit = limit
        super().__init__(
            f"Config file {path} is far too large: {size} bytes (limit {limit})",
            location="file",
        )


class IncompleteReadError(ConfigError):
    """Raised when fewer or more bytes were read than the file reported."""

    error_type: ClassVar[str] = "incomplete_read"

    def __init__(self, path: str, expected: int, actual: int) -> None:
        """Initialize the error.

        Args:
            path: Path of the config file.
            expected: Size reported by the file metadata.
            actual: Number of bytes actually read.
        """
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Failed to read config file {path}: read {actual} of {expected} bytes",
            location="file",
        )


class MalformedConfigError(ConfigError):
    """Raised when the decoder rejects the structure of the config.

    Attributes:
        errors: One ``{loc, msg, type}`` record per structural problem.
    """

    error_type: ClassVar[str] = "malformed_config"

    def __init__(
        self,
        message: str,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            message: Decoder message, kept verbatim.
            errors: Per-field structural errors, if the decoder reported any.
        """
        super().__init__(message, location="document")
        self.errors = errors or []


class ConfigValidationError(ConfigError):
    """Base exception for rule violations found during validation."""

    error_type: ClassVar[str] = "validation_error"


class InvalidTimeoutError(ConfigValidationError):
    """Raised when the connection timeout is unparseable or negative."""

    error_type: ClassVar[str] = "invalid_timeout"

    def __init__(self, value: str, reason: str) -> None:
        """Initialize the error.

        Args:
            value: Raw timeout setting.
            reason: Why the value was rejected.
        """
        self.value = value
        self.reason = reason
        super().__init__(
            f"Invalid connection timeout {value!r}: {reason}",
            location="global_section.connection_timeout",
        )


class MissingSecretError(ConfigValidationError):
    """Raised when no ingest secret is configured."""

    error_type: ClassVar[str] = "missing_secret"

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__(
            "Ingest-Secret not specified",
            location="global_section.ingest_secret",
        )


class NoBackendTargetsError(ConfigValidationError):
    """Raised when none of the three backend target lists has an entry."""

    error_type: ClassVar[str] = "no_backend_targets"

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__(
            "No backend targets specified",
            location="global_section.backend_targets",
        )


class NoFollowersError(ConfigValidationError):
    """Raised when no follower sections are configured."""

    error_type: ClassVar[str] = "no_followers"

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__("No followers specified", location="followers")


class MissingBaseDirectoryError(ConfigValidationError):
    """Raised when a follower has no base directory."""

    error_type: ClassVar[str] = "missing_base_directory"

    def __init__(self, follower: str) -> None:
        """Initialize the error.

        Args:
            follower: Name of the offending follower.
        """
        self.follower = follower
        super().__init__(
            f"No Base-Directory provided for follower {follower!r}",
            location=f"followers.{follower}.base_directory",
        )


class InvalidTagNameError(ConfigValidationError):
    """Raised when a follower tag name holds forbidden characters."""

    error_type: ClassVar[str] = "invalid_tag_name"

    def __init__(self, follower: str, tag: str) -> None:
        """Initialize the error.

        Args:
            follower: Name of the offending follower.
            tag: The rejected tag name.
        """
        self.follower = follower
        self.tag = tag
        super().__init__(
            f"Invalid characters in the Tag-Name {tag!r} for follower {follower!r}",
            location=f"followers.{follower}.tag_name",
        )


class ConfigAccessError(ConfigError):
    """Base exception for accessor calls on an unvalidated configuration."""

    error_type: ClassVar[str] = "access_error"


class NoConnectionsError(ConfigAccessError):
    """Raised when the accessor has no backend connections to return."""

    error_type: ClassVar[str] = "no_connections"

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__(
            "no connections specified",
            location="global_section.backend_targets",
        )


class NoTagsError(ConfigAccessError):
    """Raised when the accessor has no tags to return."""

    error_type: ClassVar[str] = "no_tags"

    def __init__(self) -> None:
        """Initialize the error."""
        super().__init__("No tags specified", location="followers")
