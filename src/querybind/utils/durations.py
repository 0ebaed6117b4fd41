"""Duration strings like ``300ms``, ``-1.5h`` or ``2h45m``."""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import Decimal

_UNIT_NS = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),  # U+00B5 micro sign
    "μs": Decimal(1_000),  # U+03BC greek mu
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60 * 1_000_000_000),
    "h": Decimal(3600 * 1_000_000_000),
}
_UNITS = "ns|us|µs|μs|ms|s|m|h"
_DURATION = re.compile(rf"[-+]?(?:(?:\d+\.?\d*|\.\d+)(?:{_UNITS}))+", re.ASCII)
_COMPONENT = re.compile(rf"(\d*)(?:\.(\d*))?({_UNITS})", re.ASCII)

MAX_DURATION_NS = 2**63 - 1


def parse_duration(raw: str) -> timedelta:
    """Parse a signed sequence of decimal numbers, each with a unit suffix.

    Valid units are ``ns``, ``us`` (or ``µs``), ``ms``, ``s``, ``m``, ``h``.
    A bare ``0`` is accepted. Precision below one microsecond is truncated.

    Raises:
        ValueError: On malformed input or a value beyond the signed 64-bit
            nanosecond range.
    """
    if raw in ("0", "+0", "-0"):
        return timedelta(0)
    if not _DURATION.fullmatch(raw):
        raise ValueError(f"invalid duration {raw!r}")

    negative = raw.startswith("-")
    total = Decimal(0)
    for whole, frac, unit in _COMPONENT.findall(raw.lstrip("+-")):
        total += Decimal(f"{whole or 0}.{frac or 0}") * _UNIT_NS[unit]

    nanoseconds = int(total)
    limit = MAX_DURATION_NS + 1 if negative else MAX_DURATION_NS  # two's complement range
    if nanoseconds > limit:
        raise ValueError(f"invalid duration {raw!r}")
    delta = timedelta(microseconds=nanoseconds // 1000)
    return -delta if negative else delta
