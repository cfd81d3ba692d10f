"""Structural decoding of config file content."""

import yaml
from pydantic import ValidationError

from filefollow.config.errors import MalformedConfigError
from filefollow.config.schemas import RawConfig


def decode_config(content: bytes) -> RawConfig:
    """Decode raw config bytes into a configuration tree.

    Only structure is checked here: syntax, section layout, known keys
    and value kinds. Rule validation happens afterwards.

    Args:
        content: Raw config file content.

    Returns:
        Decoded configuration tree.

    Raises:
        MalformedConfigError: If the content cannot be decoded.
    """
    try:
        text = content.decode("utf-8")
    except UnicodeDecodeError as e:
        raise MalformedConfigError(f"Config is not valid UTF-8: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise MalformedConfigError(str(e)) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config must be a mapping of sections, got {type(data).__name__}"
        raise MalformedConfigError(msg)

    try:
        return RawConfig.model_validate(data)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise MalformedConfigError(str(e), errors=errors) from e
