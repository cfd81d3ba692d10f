"""Error hints for configuration load errors.

Provides operator-facing hints with remediation steps for the errors
recorded by the config loader.
"""

from typing import Final

from filefollow.config.constants import MAX_CONFIG_SIZE
from filefollow.ingest.tags import FORBIDDEN_TAG_SET


# Mapping of error types to hints
ERROR_HINTS: Final[dict[str, str]] = {
    # File errors
    "file_not_found": "The file does not exist. Check the config path.",
    "io_error": "The file could not be opened. Check its permissions.",
    "config_too_large": f"Config files are limited to {MAX_CONFIG_SIZE} bytes. Check that the path points at the config file.",
    "incomplete_read": "The file changed while it was read. Retry once it is no longer being written.",
    # Structural errors
    "malformed_config": "Invalid YAML syntax. Check indentation and that the file holds Global and Follower sections.",
    "extra_forbidden": "Unknown key. Check the spelling against the documented keys.",
    "string_type": "This field must be a text string.",
    "bool_type": "This field must be true or false.",
    "bool_parsing": "This field must be true or false.",
    "tuple_type": "This field must be a list of strings.",
    "list_type": "This field must be a list of strings.",
    "dict_type": "This field must be a mapping.",
    "model_type": "This section must be a mapping of keys to values.",
    "value_error": "Check the value format. Keys must not be repeated.",
    # Rule violations
    "invalid_timeout": "Use a duration such as 30s, 1m30s or 500ms, or leave it empty for no timeout.",
    "missing_secret": "Set Ingest-Secret in the Global section.",
    "no_backend_targets": "Add at least one Cleartext-, Encrypted- or Pipe-Backend-Target.",
    "no_followers": "Add at least one named section under Follower.",
    "missing_base_directory": "Set Base-Directory for this follower.",
    "invalid_tag_name": "Tag names may not contain spaces or punctuation.",
}

# Field-specific hints for more context
FIELD_HINTS: Final[dict[str, str]] = {
    "connection_timeout": "Must be a non-negative duration (e.g., '30s', '1m30s') or empty.",
    "ingest_secret": "Must be the non-empty secret shared with the backend indexers.",
    "backend_targets": "List host:port targets under Cleartext-Backend-Target or Encrypted-Backend-Target.",
    "cleartext_backend_target": "Must be host:port strings (e.g., '10.0.0.1:4023').",
    "encrypted_backend_target": "Must be host:port strings (e.g., '10.0.0.1:4024').",
    "pipe_backend_target": "Must be paths to local pipes (e.g., '/opt/ingest/pipe').",
    "verify_remote_certificates": "Must be true or false.",
    "base_directory": "Must be a non-empty directory path (e.g., '/var/log/app').",
    "tag_name": f"Must not contain any of {FORBIDDEN_TAG_SET!r}; empty means 'default'.",
    "followers": "Add named follower sections with Base-Directory and File-Filter.",
}


def get_error_hint(error_type: str, field_name: str | None = None) -> str:
    """Get an operator-facing hint for a load error.

    Args:
        error_type: The error type (e.g., 'missing_secret', 'extra_forbidden').
        field_name: Optional dotted field location for field-specific hints.

    Returns:
        A hint string.
    """
    if field_name:
        # 'followers.app.tag_name' -> 'tag_name'
        simple_field = field_name.split(".")[-1]
        if simple_field in FIELD_HINTS:
            return FIELD_HINTS[simple_field]

    return ERROR_HINTS.get(
        error_type, "Check the configuration documentation for valid values."
    )


def format_validation_error(
    location: str,
    message: str,
    error_type: str,
    *,
    include_hint: bool = True,
) -> str:
    """Format a load error with optional hint.

    Args:
        location: The error location (e.g., 'followers.app.tag_name').
        message: The original error message.
        error_type: The error type.
        include_hint: Whether to include a hint.

    Returns:
        Formatted error string.
    """
    base = f"{location}: {message}"
    if include_hint:
        hint = get_error_hint(error_type, location)
        return f"{base}\n    Hint: {hint}"
    return base
