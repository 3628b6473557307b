"""Human-readable duration strings ("30m", "1h30m", "250ms") to timedelta.

Accepted form: an optional sign followed by either ``0`` or one or more
``<number><unit>`` pairs. Units are ns, us (or µs), ms, s, m and h.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
import re

_NANOS_PER_UNIT = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_MAX_NANOS = 2**63 - 1
_MIN_NANOS = -(2**63)

# "ms" must be tried before "m"
_COMPONENT_RE = re.compile(r"([0-9]*(?:\.[0-9]*)?)(ns|us|µs|μs|ms|s|m|h)")


def parse_duration(text: str) -> timedelta:
    """Parse ``text`` into a timedelta, raising ValueError if it is malformed."""
    if not isinstance(text, str) or not text:
        raise ValueError(f"invalid duration {text!r}")

    rest = text
    sign = 1
    if rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration {text!r}")

    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        m = _COMPONENT_RE.match(rest, pos)
        if not m or not any(ch.isdigit() for ch in m.group(1)):
            raise ValueError(f"invalid duration {text!r}")
        total += Decimal(m.group(1)) * _NANOS_PER_UNIT[m.group(2)]
        pos = m.end()

    # must fit in a signed 64-bit nanosecond count (about 2562047h)
    total *= sign
    if not _MIN_NANOS <= total <= _MAX_NANOS:
        raise ValueError(f"invalid duration {text!r}: out of range")

    # timedelta resolution is one microsecond; anything finer is truncated
    try:
        return timedelta(microseconds=int(total / 1000))
    except OverflowError:
        raise ValueError(f"invalid duration {text!r}: out of range") from None
