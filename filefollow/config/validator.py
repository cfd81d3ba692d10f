"""Rule validation for decoded configuration trees."""

import os

from filefollow.config.constants import DEFAULT_TAG_NAME
from filefollow.config.durations import ZERO_DURATION, parse_timeout
from filefollow.config.errors import (
    InvalidTagNameError,
    InvalidTimeoutError,
    MissingBaseDirectoryError,
    MissingSecretError,
    NoBackendTargetsError,
    NoFollowersError,
)
from filefollow.config.schemas import FollowerSection, GlobalSection, RawConfig
from filefollow.ingest.tags import contains_forbidden


def validate_config(raw: RawConfig) -> RawConfig:
    """Validate a decoded config and return its normalized form.

    Rules are checked in a fixed order and the first violation is raised.
    Followers are visited in name order. The input is left untouched;
    defaulted tag names and cleaned base directories appear only in the
    returned tree, which is keyed by follower name in sorted order.

    Args:
        raw: Decoded configuration tree.

    Returns:
        A new, normalized configuration tree.

    Raises:
        InvalidTimeoutError: If the timeout is unparseable or negative.
        MissingSecretError: If no ingest secret is set.
        NoBackendTargetsError: If no backend targets are listed.
        NoFollowersError: If no followers are configured.
        MissingBaseDirectoryError: If a follower has no base directory.
        InvalidTagNameError: If a follower tag has forbidden characters.
    """
    _check_timeout(raw.global_section)

    if not raw.global_section.ingest_secret:
        raise MissingSecretError()
    if raw.global_section.target_count() == 0:
        raise NoBackendTargetsError()
    if not raw.followers:
        raise NoFollowersError()

    followers = {
        name: _normalize_follower(name, raw.followers[name])
        for name in sorted(raw.followers)
    }
    return raw.model_copy(update={"followers": followers})


def _check_timeout(section: GlobalSection) -> None:
    """Ensure the connection timeout is a non-negative duration."""
    try:
        timeout = parse_timeout(section.connection_timeout)
    except ValueError as e:
        raise InvalidTimeoutError(section.connection_timeout, str(e)) from e
    if timeout < ZERO_DURATION:
        raise InvalidTimeoutError(section.connection_timeout, "negative duration")


def _normalize_follower(name: str, follower: FollowerSection) -> FollowerSection:
    """Check one follower and return it with defaults and clean paths."""
    if not follower.base_directory:
        raise MissingBaseDirectoryError(name)

    tag_name = follower.tag_name or DEFAULT_TAG_NAME
    if contains_forbidden(tag_name):
        raise InvalidTagNameError(name, tag_name)

    return follower.model_copy(
        update={
            "tag_name": tag_name,
            "base_directory": os.path.normpath(follower.base_directory),
        }
    )
