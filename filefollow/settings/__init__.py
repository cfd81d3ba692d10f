"""Agent settings loading."""

from .app import AgentSettings, get_settings


__all__ = ["AgentSettings", "get_settings"]
