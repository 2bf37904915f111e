"""
Parsed-value cache for hot-path option reads.

Option values are stored as strings. Converting them on every ``get_int`` or
``get_bool`` call is measurable once those calls end up inside AI loops, so the
parsed value is memoized per key until the option is written again.
"""

import re
from typing import Dict

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)", re.ASCII)
_TRUE_PREFIX = re.compile(r"\s*true", re.ASCII)


def parse_int(value: str) -> int:
    """Decode the leading decimal integer of ``value``.

    Locale-independent. Trailing garbage is ignored (``"800px"`` -> 800) and a
    value without a leading integer decodes to 0 instead of raising.
    """
    match = _INT_PREFIX.match(value)
    if match is None:
        return 0
    return int(match.group(1))


def parse_bool(value: str) -> bool:
    """Decode a ``true``/``false`` literal; anything else reads as False."""
    return _TRUE_PREFIX.match(value) is not None


def format_int(value: int) -> str:
    return str(int(value))


def format_bool(value: bool) -> str:
    return "true" if value else "false"


class TypedCache:
    """Per-key cache of parsed int and bool interpretations.

    Each access type has its own slot: an int cached for a key does not answer
    a bool read of the same key.
    """

    def __init__(self) -> None:
        self.ints: Dict[str, int] = {}
        self.bools: Dict[str, bool] = {}

    def store_int(self, key: str, value: int) -> None:
        """Cache an int for key and drop the now stale bool slot."""
        self.ints[key] = value
        self.bools.pop(key, None)

    def store_bool(self, key: str, value: bool) -> None:
        """Cache a bool for key and drop the now stale int slot."""
        self.bools[key] = value
        self.ints.pop(key, None)

    def invalidate(self, key: str) -> None:
        """Forget every cached interpretation of key."""
        self.ints.pop(key, None)
        self.bools.pop(key, None)

    def clear(self) -> None:
        self.ints.clear()
        self.bools.clear()

    def __len__(self) -> int:
        return len(self.ints) + len(self.bools)
