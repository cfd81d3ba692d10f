"""Root schema for a decoded config document."""

from collections.abc import Mapping
from typing import Any, Final

from pydantic import Field, model_validator

from filefollow.config.schemas.base import SectionModel, normalize_section
from filefollow.config.schemas.followers import FollowerSection
from filefollow.config.schemas.global_section import GlobalSection


# Document section names mapped to field names
SECTION_ALIASES: Final[dict[str, str]] = {
    "global": "global_section",
    "follower": "followers",
}


class RawConfig(SectionModel):
    """Decoded configuration tree before rule validation.

    Attributes:
        global_section: The ``Global`` section.
        followers: The ``Follower`` sections keyed by follower name.
    """

    global_section: GlobalSection = Field(default_factory=GlobalSection)
    followers: dict[str, FollowerSection] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """Match section names and fill in empty follower sections."""
        if data is None:
            return {}
        if not isinstance(data, Mapping):
            return data
        normalized = normalize_section(data, SECTION_ALIASES)
        followers = normalized.get("followers")
        if isinstance(followers, Mapping):
            normalized["followers"] = {
                name: {} if entry is None else entry
                for name, entry in followers.items()
            }
        return normalized
