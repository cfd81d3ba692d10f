"""Unit tests for AgentConfig."""

import json
from datetime import timedelta

import pytest
from pydantic import ValidationError

from filefollow.config.effective import AgentConfig
from filefollow.config.errors import NoConnectionsError, NoTagsError
from filefollow.config.schemas import FollowerSection, GlobalSection, RawConfig
from filefollow.config.validator import validate_config


@pytest.fixture
def global_section() -> GlobalSection:
    """Create a global section with targets on every transport."""
    return GlobalSection(
        state_store_location="/opt/filefollow/state",
        ingest_secret="IngestSecrets",
        connection_timeout="30s",
        verify_remote_certificates=True,
        cleartext_backend_target=("10.0.0.1:4023", "10.0.0.2:4023"),
        encrypted_backend_target=("10.0.0.3:4024",),
        pipe_backend_target=("/opt/ingest/pipe",),
        log_level="WARN",
        ingest_cache_path="/opt/filefollow/cache",
    )


@pytest.fixture
def agent_config(global_section: GlobalSection) -> AgentConfig:
    """Create a validated agent configuration."""
    raw = RawConfig(
        global_section=global_section,
        followers={
            "syslog": FollowerSection(base_directory="/var/log/", tag_name="syslog"),
            "auth": FollowerSection(base_directory="/var/log", tag_name="syslog"),
            "app": FollowerSection(base_directory="/var/log/app/", file_filter="*.log"),
        },
    )
    return AgentConfig.from_validated(
        validate_config(raw),
        source_path="/etc/filefollow/file_follow.yaml",
        file_checksum="ab" * 32,
    )


class TestTargets:
    """Tests for AgentConfig.targets."""

    @pytest.mark.unit
    def test_scheme_order_and_source_order(self, agent_config: AgentConfig) -> None:
        """Test cleartext, then encrypted, then pipe, each in source order."""
        assert agent_config.targets() == [
            "tcp://10.0.0.1:4023",
            "tcp://10.0.0.2:4023",
            "tls://10.0.0.3:4024",
            "pipe:///opt/ingest/pipe",
        ]

    @pytest.mark.unit
    def test_only_encrypted(self) -> None:
        """Test a config with a single transport."""
        config = AgentConfig(
            global_section=GlobalSection(encrypted_backend_target=("idx:4024",))
        )
        assert config.targets() == ["tls://idx:4024"]

    @pytest.mark.unit
    def test_no_targets_raises(self) -> None:
        """Test the guard against an unvalidated configuration."""
        config = AgentConfig(global_section=GlobalSection())
        with pytest.raises(NoConnectionsError):
            config.targets()

    @pytest.mark.unit
    def test_returns_fresh_list(self, agent_config: AgentConfig) -> None:
        """Test that callers cannot alter later results."""
        first = agent_config.targets()
        first.append("tcp://evil:1")
        assert "tcp://evil:1" not in agent_config.targets()


class TestTags:
    """Tests for AgentConfig.tags."""

    @pytest.mark.unit
    def test_distinct_in_name_order(self, agent_config: AgentConfig) -> None:
        """Test deduplication and first-seen order over sorted followers."""
        assert agent_config.tags() == ["default", "syslog"]

    @pytest.mark.unit
    def test_empty_tags_skipped(self, global_section: GlobalSection) -> None:
        """Test that followers without a tag contribute nothing."""
        config = AgentConfig(
            global_section=global_section,
            follower_sections={
                "a": FollowerSection(base_directory="/a"),
                "b": FollowerSection(base_directory="/b", tag_name="web"),
            },
        )
        assert config.tags() == ["web"]

    @pytest.mark.unit
    def test_no_tags_raises(self, global_section: GlobalSection) -> None:
        """Test the guard against an unvalidated configuration."""
        config = AgentConfig(
            global_section=global_section,
            follower_sections={"a": FollowerSection(base_directory="/a")},
        )
        with pytest.raises(NoTagsError):
            config.tags()

    @pytest.mark.unit
    def test_no_followers_raises(self, global_section: GlobalSection) -> None:
        """Test that a config without followers has no tags."""
        with pytest.raises(NoTagsError):
            AgentConfig(global_section=global_section).tags()


class TestTimeout:
    """Tests for AgentConfig.timeout."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("30s", timedelta(seconds=30)),
            (" 1m ", timedelta(minutes=1)),
            ("", timedelta(0)),
            ("0s", timedelta(0)),
            ("-5s", timedelta(0)),
            ("garbage", timedelta(0)),
        ],
    )
    def test_timeout_values(self, value: str, expected: timedelta) -> None:
        """Test that only positive durations are reported."""
        config = AgentConfig(global_section=GlobalSection(connection_timeout=value))
        assert config.timeout() == expected


class TestScalarAccessors:
    """Tests for the verbatim accessors."""

    @pytest.mark.unit
    def test_scalars(self, agent_config: AgentConfig) -> None:
        """Test that scalar settings are returned unchanged."""
        assert agent_config.verify_remote() is True
        assert agent_config.secret() == "IngestSecrets"
        assert agent_config.log_level() == "WARN"
        assert agent_config.cache_path() == "/opt/filefollow/cache"
        assert agent_config.state_path() == "/opt/filefollow/state"

    @pytest.mark.unit
    def test_cache_enabled(self, agent_config: AgentConfig) -> None:
        """Test that a cache path enables the cache."""
        assert agent_config.cache_enabled() is True

    @pytest.mark.unit
    def test_cache_disabled_without_path(self) -> None:
        """Test that an empty cache path disables the cache."""
        config = AgentConfig(global_section=GlobalSection())
        assert config.cache_enabled() is False


class TestFollowers:
    """Tests for AgentConfig.followers."""

    @pytest.mark.unit
    def test_normalized_entries(self, agent_config: AgentConfig) -> None:
        """Test that followers come back validated and sorted."""
        followers = agent_config.followers()
        assert list(followers) == ["app", "auth", "syslog"]
        assert followers["app"].base_directory == "/var/log/app"
        assert followers["app"].tag_name == "default"
        assert followers["syslog"].base_directory == "/var/log"

    @pytest.mark.unit
    def test_returns_copy(self, agent_config: AgentConfig) -> None:
        """Test that changing the result does not change the config."""
        followers = agent_config.followers()
        del followers["app"]
        followers["evil"] = FollowerSection(base_directory="/")
        assert list(agent_config.followers()) == ["app", "auth", "syslog"]

    @pytest.mark.unit
    def test_entries_are_copies(self, agent_config: AgentConfig) -> None:
        """Test that returned entries are not the stored instances."""
        followers = agent_config.followers()
        stored = dict(agent_config.follower_sections)
        assert followers["app"] == stored["app"]
        assert followers["app"] is not stored["app"]

    @pytest.mark.unit
    def test_mapping_stored_in_name_order(self, global_section: GlobalSection) -> None:
        """Test that a name-keyed mapping is stored as sorted pairs."""
        config = AgentConfig(
            global_section=global_section,
            follower_sections={
                "zeta": FollowerSection(base_directory="/z", tag_name="z"),
                "alpha": FollowerSection(base_directory="/a", tag_name="a"),
            },
        )
        assert [name for name, _ in config.follower_sections] == ["alpha", "zeta"]

    @pytest.mark.unit
    def test_stored_followers_cannot_be_changed(
        self, agent_config: AgentConfig
    ) -> None:
        """Test that the validated followers cannot be rewritten in place."""
        with pytest.raises(AttributeError):
            agent_config.follower_sections.clear()  # type: ignore[attr-defined]
        with pytest.raises(TypeError):
            agent_config.follower_sections[0] = (  # type: ignore[index]
                "evil",
                FollowerSection(base_directory="/"),
            )
        _, follower = agent_config.follower_sections[0]
        with pytest.raises(ValidationError):
            follower.tag_name = "evil"  # type: ignore[misc]

        assert agent_config.tags() == ["default", "syslog"]
        assert list(agent_config.followers()) == ["app", "auth", "syslog"]


class TestAgentConfigImmutability:
    """Tests for AgentConfig immutability and serialization."""

    @pytest.mark.unit
    def test_frozen(self, agent_config: AgentConfig) -> None:
        """Test that the configuration cannot be reassigned."""
        with pytest.raises(ValidationError):
            agent_config.source_path = "/tmp/other.yaml"  # type: ignore[misc]

    @pytest.mark.unit
    def test_extra_fields_rejected(self, global_section: GlobalSection) -> None:
        """Test that unknown fields are refused."""
        with pytest.raises(ValidationError):
            AgentConfig(global_section=global_section, unknown="x")  # type: ignore[call-arg]

    @pytest.mark.unit
    def test_checksum_stable(self, agent_config: AgentConfig) -> None:
        """Test that the checksum is repeatable and hex-encoded."""
        checksum = agent_config.compute_checksum()
        assert checksum == agent_config.compute_checksum()
        assert len(checksum) == 64
        int(checksum, 16)

    @pytest.mark.unit
    def test_normalized_json_sorted(self, agent_config: AgentConfig) -> None:
        """Test that the normalized JSON has sorted keys."""
        data = json.loads(agent_config.to_normalized_json())
        assert list(data) == sorted(data)

    @pytest.mark.unit
    def test_summary_redacts_secret(self, agent_config: AgentConfig) -> None:
        """Test that the summary never carries the ingest secret."""
        summary = agent_config.summary()
        assert summary["ingest_secret"] == "[REDACTED]"
        assert "IngestSecrets" not in json.dumps(summary)
        assert summary["timeout_seconds"] == 30.0
        assert summary["tags"] == ["default", "syslog"]
        assert summary["cache_enabled"] is True
