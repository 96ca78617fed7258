"""
Defensive accessors for untyped records.

Records come straight from decoded JSON and may be partially shaped, so
lookups return the MISSING sentinel instead of raising.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class _Missing:
    """Sentinel for an absent key."""

    _instance = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def has_key(record: Any, key: str) -> bool:
    """Check key presence; non-mapping records have no keys."""
    return isinstance(record, Mapping) and key in record


def get_value(record: Any, key: str) -> Any:
    """Return the value under key, or MISSING."""
    if not has_key(record, key):
        return MISSING
    return record[key]


def get_str(record: Any, key: str, default: str) -> str:
    """Return the value under key if it is a string, else default."""
    value = get_value(record, key)
    return value if isinstance(value, str) else default


def format_number(value: Any) -> str:
    """Render a catalog number the way JSON would show it."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
