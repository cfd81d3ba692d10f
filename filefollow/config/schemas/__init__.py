"""Configuration schema definitions."""

from filefollow.config.schemas.base import SectionModel, normalize_key
from filefollow.config.schemas.document import RawConfig
from filefollow.config.schemas.followers import FollowerSection
from filefollow.config.schemas.global_section import GlobalSection


__all__ = [
    "FollowerSection",
    "GlobalSection",
    "RawConfig",
    "SectionModel",
    "normalize_key",
]
