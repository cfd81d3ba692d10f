"""Follower section schema."""

from filefollow.config.schemas.base import SectionModel


class FollowerSection(SectionModel):
    """Configuration for a single watched directory.

    Attributes:
        base_directory: Directory to watch.
        file_filter: Glob that file names must match.
        tag_name: Tag applied to ingested lines.
        ignore_timestamps: Stamp lines with arrival time instead of parsing.
        assume_local_timezone: Read ambiguous timestamps as local time.
    """

    base_directory: str = ""
    file_filter: str = ""
    tag_name: str = ""
    ignore_timestamps: bool = False
    assume_local_timezone: bool = False
