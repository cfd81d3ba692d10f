"""Base schema types for configuration sections."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator


def normalize_key(key: object) -> str:
    """Normalize a config key for matching.

    Keys are case-insensitive and treat ``-`` and ``_`` as the same
    character, so ``Ingest-Secret`` and ``ingest_secret`` are one key.

    Args:
        key: Raw key from the decoded document.

    Returns:
        Lowercase, underscore-separated key.
    """
    return str(key).strip().lower().replace("-", "_")


def normalize_section(
    data: Mapping[Any, Any],
    aliases: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Normalize the keys of a decoded section.

    Null values are dropped so that the field default applies.

    Args:
        data: Decoded section mapping.
        aliases: Optional mapping of normalized key to field name.

    Returns:
        New mapping keyed by field name.

    Raises:
        ValueError: If two keys normalize to the same field.
    """
    aliases = aliases or {}
    normalized: dict[str, Any] = {}
    seen: set[str] = set()
    for key, value in data.items():
        name = normalize_key(key)
        name = aliases.get(name, name)
        if name in seen:
            msg = f"Duplicate key {key!r}"
            raise ValueError(msg)
        seen.add(name)
        if value is None:
            continue
        normalized[name] = value
    return normalized


class SectionModel(BaseModel):
    """Base model for a config section.

    Sections are immutable once built and reject unknown keys. Numeric
    scalars are accepted where text is expected.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_keys(cls, data: Any) -> Any:
        """Match decoded keys to field names."""
        if data is None:
            return {}
        if isinstance(data, Mapping):
            return normalize_section(data)
        return data


def as_list(value: Any) -> Any:
    """Wrap a single scalar in a list for repeatable keys."""
    if isinstance(value, str | int | float):
        return [value]
    return value
