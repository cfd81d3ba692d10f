"""Duration string parsing for connection timeouts.

Timeouts are written the way the rest of the agent writes durations:
an optional sign followed by one or more decimal numbers, each with a
unit suffix, e.g. ``"300ms"``, ``"1.5h"`` or ``"2h45m"``.
"""

import re
from datetime import timedelta
from decimal import Decimal
from typing import Final


# Microseconds per unit suffix.
UNIT_MICROSECONDS: Final[dict[str, Decimal]] = {
    "ns": Decimal("0.001"),
    "us": Decimal(1),
    "µs": Decimal(1),  # micro sign
    "μs": Decimal(1),  # greek mu
    "ms": Decimal(1_000),
    "s": Decimal(1_000_000),
    "m": Decimal(60_000_000),
    "h": Decimal(3_600_000_000),
}

_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?(ns|us|µs|μs|ms|s|m|h)")
_UNITLESS_RE = re.compile(r"[0-9.]+$")

# Durations are bounded by a signed 64-bit nanosecond count.
_MAX_NANOSECONDS: Final[int] = 2**63 - 1

ZERO_DURATION: Final[timedelta] = timedelta(0)


def parse_duration(text: str) -> timedelta:
    """Parse a duration string into a timedelta.

    Precision below one microsecond is truncated toward zero.

    Args:
        text: Duration string such as ``"30s"`` or ``"-1m30s"``.

    Returns:
        Parsed duration, possibly negative.

    Raises:
        ValueError: If the string is not a valid duration.
    """
    body = text
    negative = False
    if body[:1] in ("-", "+"):
        negative = body[0] == "-"
        body = body[1:]

    if body == "0":
        return ZERO_DURATION
    if not body:
        msg = f'invalid duration "{text}"'
        raise ValueError(msg)

    total = Decimal(0)
    pos = 0
    while pos < len(body):
        match = _COMPONENT_RE.match(body, pos)
        if match is None:
            if _UNITLESS_RE.match(body, pos):
                msg = f'missing unit in duration "{text}"'
            else:
                msg = f'invalid duration "{text}"'
            raise ValueError(msg)

        whole, fraction, unit = match.groups()
        if not whole and not fraction:
            msg = f'invalid duration "{text}"'
            raise ValueError(msg)

        amount = Decimal(f"{whole or '0'}.{fraction or '0'}")
        total += amount * UNIT_MICROSECONDS[unit]
        pos = match.end()

    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    if total * 1_000 > limit:
        msg = f'invalid duration "{text}"'
        raise ValueError(msg)

    microseconds = int(total)
    if negative:
        microseconds = -microseconds
    return timedelta(microseconds=microseconds)


def parse_timeout(text: str) -> timedelta:
    """Parse a connection timeout setting.

    A blank value means no timeout and yields a zero duration.

    Args:
        text: Raw timeout setting.

    Returns:
        Parsed duration.

    Raises:
        ValueError: If a non-blank value is not a valid duration.
    """
    stripped = text.strip()
    if not stripped:
        return ZERO_DURATION
    return parse_duration(stripped)
