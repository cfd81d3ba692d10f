"""Tag name character rules owned by the tagging subsystem."""

from typing import Final


# Characters the tag registry refuses to store in a tag name.
FORBIDDEN_TAG_SET: Final[str] = "!@#$%^&*()=+<>,.:;`\"'{[}]|\\ \t\n\r"


def contains_forbidden(tag: str) -> bool:
    """Check whether a tag name contains any forbidden character.

    Args:
        tag: Tag name to inspect.

    Returns:
        True if at least one character of the tag is forbidden.
    """
    return any(char in FORBIDDEN_TAG_SET for char in tag)
