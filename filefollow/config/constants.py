"""Constants for the configuration module."""

# Config files are operator-authored text; anything bigger is refused unread
MAX_CONFIG_SIZE = 2 * 1024 * 1024

# Tag applied to followers that do not name one
DEFAULT_TAG_NAME = "default"

# Connection URI scheme prefixes, in dial order
SCHEME_CLEARTEXT = "tcp://"
SCHEME_ENCRYPTED = "tls://"
SCHEME_PIPE = "pipe://"

# Default location of the agent config file
DEFAULT_CONFIG_PATH = "/etc/filefollow/file_follow.yaml"

# Validation result values
VALIDATION_PASSED = "PASSED"
VALIDATION_FAILED = "FAILED"

# Log component names
COMPONENT_CONFIG = "config"
COMPONENT_CLI = "cli"

# Placeholder shown instead of the ingest secret
REDACTED_VALUE = "[REDACTED]"
