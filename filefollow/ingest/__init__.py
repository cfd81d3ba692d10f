"""Ingest-side collaborators shared with the tagging subsystem."""

from filefollow.ingest.tags import FORBIDDEN_TAG_SET, contains_forbidden


__all__ = [
    "FORBIDDEN_TAG_SET",
    "contains_forbidden",
]
