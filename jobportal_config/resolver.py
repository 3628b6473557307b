"""Typed parse-or-default rules for environment values.

Every rule takes the raw value (``None`` when the key is unset) and a
fallback, and always returns a usable value. A value that does not parse is
treated exactly like a missing one.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Mapping, Optional, Tuple
import re

from .durations import parse_duration

SAFE_DEFAULT_DURATION = timedelta(hours=1)

_INT_RE = re.compile(r"[+-]?[0-9]+")
_MAX_INT = 2**63 - 1
_MIN_INT = -(2**63)
_TRUE = {"1", "t", "true"}
_FALSE = {"0", "f", "false"}


def resolve_str(raw: Optional[str], fallback: str) -> str:
    return raw if raw else fallback


def resolve_required_str(raw: Optional[str], fallback: str) -> str:
    """Like resolve_str, but an explicitly empty value is kept as-is.

    Used for keys that are checked afterwards; the default must not hide an
    operator setting them to nothing.
    """
    return fallback if raw is None else raw


def resolve_int(raw: Optional[str], fallback: int) -> int:
    """Signed 64-bit base-10 integer, or ``fallback``."""
    if not raw or not _INT_RE.fullmatch(raw):
        return fallback
    try:
        value = int(raw)
    except ValueError:
        # longer than the interpreter's int-conversion digit limit
        return fallback
    if not _MIN_INT <= value <= _MAX_INT:
        return fallback
    return value


def resolve_bool(raw: Optional[str], fallback: bool) -> bool:
    if raw:
        value = raw.lower()
        if value in _TRUE:
            return True
        if value in _FALSE:
            return False
    return fallback


def resolve_duration(raw: Optional[str], fallback: str) -> timedelta:
    """Environment value, then the fallback string, then SAFE_DEFAULT_DURATION."""
    for candidate in (raw, fallback):
        if not candidate:
            continue
        try:
            return parse_duration(candidate)
        except ValueError:
            continue
    return SAFE_DEFAULT_DURATION


def split_list(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


def resolve_list(raw: Optional[str], fallback: str) -> Tuple[str, ...]:
    items = split_list(resolve_str(raw, fallback))
    return items or split_list(fallback)


class EnvReader:
    """Applies the resolution rules to keys of an injected lookup (usually os.environ)."""

    def __init__(self, lookup: Mapping[str, str]):
        self.lookup = lookup

    def raw(self, key: str) -> Optional[str]:
        return self.lookup.get(key)

    def get_str(self, key: str, fallback: str) -> str:
        return resolve_str(self.raw(key), fallback)

    def get_required_str(self, key: str, fallback: str) -> str:
        return resolve_required_str(self.raw(key), fallback)

    def get_int(self, key: str, fallback: int) -> int:
        return resolve_int(self.raw(key), fallback)

    def get_bool(self, key: str, fallback: bool) -> bool:
        return resolve_bool(self.raw(key), fallback)

    def get_duration(self, key: str, fallback: str) -> timedelta:
        return resolve_duration(self.raw(key), fallback)

    def get_list(self, key: str, fallback: str) -> Tuple[str, ...]:
        return resolve_list(self.raw(key), fallback)
