"""Read-only view over a validated agent configuration."""

import hashlib
import json
from collections.abc import Mapping
from datetime import timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from filefollow.config.constants import (
    REDACTED_VALUE,
    SCHEME_CLEARTEXT,
    SCHEME_ENCRYPTED,
    SCHEME_PIPE,
)
from filefollow.config.durations import ZERO_DURATION, parse_timeout
from filefollow.config.errors import NoConnectionsError, NoTagsError
from filefollow.config.schemas import FollowerSection, GlobalSection, RawConfig


class AgentConfig(BaseModel):
    """Validated configuration handed to the agent at startup.

    Instances are immutable. Build them with ``from_validated`` from a
    tree returned by ``validate_config``; every query method is a pure
    read that either returns a value or a freshly built collection.

    Attributes:
        global_section: Validated ``Global`` section.
        follower_sections: Validated (name, follower) pairs in name
            order. Stored as a tuple so the validated set cannot be
            changed in place.
        source_path: Path the configuration was read from, if any.
        file_checksum: SHA-256 of the raw config file bytes.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    global_section: GlobalSection
    follower_sections: tuple[tuple[str, FollowerSection], ...] = ()
    source_path: str | None = None
    file_checksum: str = ""

    @field_validator("follower_sections", mode="before")
    @classmethod
    def sort_follower_sections(cls, value: Any) -> Any:
        """Accept a name-keyed mapping and store it as sorted pairs."""
        if isinstance(value, Mapping):
            return tuple(sorted(value.items()))
        return value

    @classmethod
    def from_validated(
        cls,
        raw: RawConfig,
        *,
        source_path: str | None = None,
        file_checksum: str = "",
    ) -> "AgentConfig":
        """Wrap a validated tree.

        Args:
            raw: Tree returned by ``validate_config``.
            source_path: Path the configuration was read from.
            file_checksum: SHA-256 of the raw file bytes.

        Returns:
            Immutable agent configuration.
        """
        return cls(
            global_section=raw.global_section,
            follower_sections=raw.followers,
            source_path=source_path,
            file_checksum=file_checksum,
        )

    def targets(self) -> list[str]:
        """Build backend connection URIs.

        Cleartext targets come first, then encrypted, then pipe targets;
        each group keeps its configured order.

        Returns:
            Connection URIs such as ``tcp://10.0.0.1:4023``.

        Raises:
            NoConnectionsError: If no targets are configured.
        """
        section = self.global_section
        conns = [SCHEME_CLEARTEXT + t for t in section.cleartext_backend_target]
        conns.extend(SCHEME_ENCRYPTED + t for t in section.encrypted_backend_target)
        conns.extend(SCHEME_PIPE + t for t in section.pipe_backend_target)
        if not conns:
            raise NoConnectionsError()
        return conns

    def tags(self) -> list[str]:
        """Collect the distinct follower tag names in first-seen order.

        Followers are visited in name order.

        Returns:
            Unique tag names.

        Raises:
            NoTagsError: If no follower carries a tag.
        """
        tags: list[str] = []
        seen: set[str] = set()
        for _name, follower in self.follower_sections:
            if not follower.tag_name:
                continue
            if follower.tag_name not in seen:
                seen.add(follower.tag_name)
                tags.append(follower.tag_name)
        if not tags:
            raise NoTagsError()
        return tags

    def verify_remote(self) -> bool:
        """Whether remote TLS certificates must be verified."""
        return self.global_section.verify_remote_certificates

    def timeout(self) -> timedelta:
        """Get the backend connection timeout.

        Zero means no timeout is enforced; unset, unparseable and
        non-positive settings all read as zero.
        """
        try:
            timeout = parse_timeout(self.global_section.connection_timeout)
        except ValueError:
            return ZERO_DURATION
        if timeout > ZERO_DURATION:
            return timeout
        return ZERO_DURATION

    def secret(self) -> str:
        return self.global_section.ingest_secret

    def log_level(self) -> str:
        return self.global_section.log_level

    def cache_path(self) -> str:
        return self.global_section.ingest_cache_path

    def cache_enabled(self) -> bool:
        return self.global_section.ingest_cache_path != ""

    def state_path(self) -> str:
        return self.global_section.state_store_location

    def followers(self) -> dict[str, FollowerSection]:
        """Get a copy of the follower sections keyed by name.

        The returned mapping and its entries are copies; changing them
        does not affect this configuration.
        """
        return {
            name: follower.model_copy()
            for name, follower in self.follower_sections
        }

    def to_normalized_json(self) -> str:
        """Convert to normalized JSON with stable ordering.

        Returns:
            JSON string with sorted keys.
        """
        data = self.model_dump(mode="json")
        return json.dumps(data, sort_keys=True, separators=(",", ":"))

    def compute_checksum(self) -> str:
        """Compute SHA-256 checksum of the normalized configuration.

        Returns:
            Hex-encoded SHA-256 checksum.
        """
        normalized = self.to_normalized_json()
        return hashlib.sha256(normalized.encode("utf-8")).hexdigest()

    def summary(self) -> dict[str, object]:
        """Get an operator-facing summary with the secret redacted.

        Returns:
            Dictionary with summary information.
        """
        return {
            "source_path": self.source_path,
            "file_checksum": self.file_checksum,
            "config_checksum": self.compute_checksum(),
            "ingest_secret": REDACTED_VALUE if self.secret() else "",
            "targets": self.targets(),
            "tags": self.tags(),
            "verify_remote": self.verify_remote(),
            "timeout_seconds": self.timeout().total_seconds(),
            "log_level": self.log_level(),
            "state_path": self.state_path(),
            "cache_enabled": self.cache_enabled(),
            "cache_path": self.cache_path(),
            "followers": {
                name: follower.model_dump(mode="json")
                for name, follower in self.follower_sections
            },
        }
