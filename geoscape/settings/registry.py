"""
Option registry for geoscape.

The registry is the single source of truth for option values. Every value is
held as a string; typed reads go through a :class:`TypedCache` so repeated
reads never re-parse.
"""

import logging
from typing import Dict, ItemsView, Iterator, KeysView, Mapping, Optional

from .cache import TypedCache, format_bool, format_int, parse_bool, parse_int
from .defaults import DefaultValue
from .rulesets import RulesetList

logger = logging.getLogger(__name__)


class OptionRegistry:
    """String-valued option map with a parsed-value cache."""

    def __init__(self, rulesets: Optional[RulesetList] = None):
        self._options: Dict[str, str] = {}
        self._cache = TypedCache()
        self.rulesets = rulesets if rulesets is not None else RulesetList()

    @property
    def cache(self) -> TypedCache:
        return self._cache

    def create_defaults(self, defaults: Mapping[str, DefaultValue]) -> None:
        """Replace every option with the default table and reset rulesets.

        The cache is emptied last so defaults never shadow values loaded later.
        """
        self._options.clear()
        for key, value in defaults.items():
            if isinstance(value, bool):
                self.set_bool(key, value)
            elif isinstance(value, int):
                self.set_int(key, value)
            else:
                self.set_string(key, str(value))
        self.rulesets.reset()
        self._cache.clear()
        logger.debug(f"Created {len(self._options)} default options")

    # === STRING ACCESS ===

    def get_string(self, key: str) -> str:
        """Return the option value, or "" for an unknown key.

        Reading an unknown key does not add it to the registry.
        """
        return self._options.get(key, "")

    def set_string(self, key: str, value: str) -> None:
        self._options[key] = value
        self._cache.invalidate(key)

    # === TYPED ACCESS ===

    def get_int(self, key: str) -> int:
        try:
            return self._cache.ints[key]
        except KeyError:
            value = parse_int(self.get_string(key))
            self._cache.ints[key] = value
            return value

    def set_int(self, key: str, value: int) -> None:
        self._options[key] = format_int(value)
        self._cache.store_int(key, int(value))

    def get_bool(self, key: str) -> bool:
        try:
            return self._cache.bools[key]
        except KeyError:
            value = parse_bool(self.get_string(key))
            self._cache.bools[key] = value
            return value

    def set_bool(self, key: str, value: bool) -> None:
        self._options[key] = format_bool(value)
        self._cache.store_bool(key, bool(value))

    # === BULK ACCESS ===

    def update(self, values: Mapping[str, str]) -> None:
        """Overwrite options from a string mapping; unknown keys are added."""
        for key, value in values.items():
            self.set_string(key, value)

    def find_key(self, name: str) -> Optional[str]:
        """Find an existing key by case-insensitive name."""
        if name in self._options:
            return name
        lowered = name.lower()
        for key in self._options:
            if key.lower() == lowered:
                return key
        return None

    def keys(self) -> KeysView[str]:
        return self._options.keys()

    def items(self) -> ItemsView[str, str]:
        return self._options.items()

    def snapshot(self) -> Dict[str, str]:
        """Copy of every option, keys in sorted order."""
        return {key: self._options[key] for key in sorted(self._options)}

    def __contains__(self, key: object) -> bool:
        return key in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._options))

    def __len__(self) -> int:
        return len(self._options)
