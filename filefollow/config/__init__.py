"""Configuration loading and validation module."""

from filefollow.config.effective import AgentConfig
from filefollow.config.errors import (
    ConfigAccessError,
    ConfigError,
    ConfigTooLargeError,
    ConfigValidationError,
    IncompleteReadError,
    InvalidTagNameError,
    InvalidTimeoutError,
    MalformedConfigError,
    MissingBaseDirectoryError,
    MissingSecretError,
    NoBackendTargetsError,
    NoConnectionsError,
    NoFollowersError,
    NoTagsError,
)
from filefollow.config.loader import ConfigLoader, load_config
from filefollow.config.state_machine import LoadState, LoadStateError
from filefollow.config.validator import validate_config


__all__ = [
    "AgentConfig",
    "ConfigAccessError",
    "ConfigError",
    "ConfigLoader",
    "ConfigTooLargeError",
    "ConfigValidationError",
    "IncompleteReadError",
    "InvalidTagNameError",
    "InvalidTimeoutError",
    "LoadState",
    "LoadStateError",
    "MalformedConfigError",
    "MissingBaseDirectoryError",
    "MissingSecretError",
    "NoBackendTargetsError",
    "NoConnectionsError",
    "NoFollowersError",
    "NoTagsError",
    "load_config",
    "validate_config",
]
