"""Global section schema."""

from typing import Any

from pydantic import Field, field_validator

from filefollow.config.schemas.base import SectionModel, as_list


class GlobalSection(SectionModel):
    """Agent-wide settings.

    Attributes:
        state_store_location: Where the follower state object is kept.
        ingest_secret: Shared secret used to authenticate to backends.
        connection_timeout: Backend connection timeout as a duration string.
        verify_remote_certificates: Whether TLS peers must present valid certs.
        cleartext_backend_target: Plaintext backend host:port targets.
        encrypted_backend_target: TLS backend host:port targets.
        pipe_backend_target: Local pipe backend paths.
        log_level: Agent log level name.
        ingest_cache_path: On-disk cache path; empty disables the cache.
    """

    state_store_location: str = ""
    ingest_secret: str = ""
    connection_timeout: str = ""
    verify_remote_certificates: bool = False
    cleartext_backend_target: tuple[str, ...] = Field(default_factory=tuple)
    encrypted_backend_target: tuple[str, ...] = Field(default_factory=tuple)
    pipe_backend_target: tuple[str, ...] = Field(default_factory=tuple)
    log_level: str = ""
    ingest_cache_path: str = ""

    @field_validator(
        "cleartext_backend_target",
        "encrypted_backend_target",
        "pipe_backend_target",
        mode="before",
    )
    @classmethod
    def accept_single_target(cls, v: Any) -> Any:
        """Allow a lone target to be written without list syntax."""
        return as_list(v)

    def target_count(self) -> int:
        """Count backend targets across all transports."""
        return (
            len(self.cleartext_backend_target)
            + len(self.encrypted_backend_target)
            + len(self.pipe_backend_target)
        )
