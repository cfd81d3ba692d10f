"""Unit tests for agent settings."""

from pathlib import Path

import pytest

from filefollow.config.constants import DEFAULT_CONFIG_PATH
from filefollow.settings import AgentSettings, get_settings


class TestAgentSettings:
    """Tests for AgentSettings."""

    @pytest.mark.unit
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings without environment overrides."""
        monkeypatch.delenv("FILEFOLLOW_CONFIG_PATH", raising=False)
        monkeypatch.delenv("FILEFOLLOW_JSON_LOGS", raising=False)
        settings = AgentSettings(_env_file=None)  # type: ignore[call-arg]
        assert settings.config_path == Path(DEFAULT_CONFIG_PATH)
        assert settings.json_logs is True

    @pytest.mark.unit
    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that prefixed environment variables are read."""
        monkeypatch.setenv("FILEFOLLOW_CONFIG_PATH", "/tmp/agent.yaml")
        monkeypatch.setenv("FILEFOLLOW_JSON_LOGS", "false")
        settings = get_settings()
        assert settings.config_path == Path("/tmp/agent.yaml")
        assert settings.json_logs is False
