"""
Ruleset list for geoscape.
"""

from typing import Iterable, Iterator, List

from .defaults import DEFAULT_RULESETS


class RulesetList:
    """Ordered list of ruleset names; the first entry is the base ruleset."""

    def __init__(self, names: Iterable[str] = DEFAULT_RULESETS):
        self._names: List[str] = [str(name) for name in names]

    def reset(self) -> None:
        """Restore the single default ruleset."""
        self._names = list(DEFAULT_RULESETS)

    def replace(self, names: Iterable[str]) -> None:
        """Replace the whole list, keeping the given order."""
        self._names = [str(name) for name in names]

    def to_list(self) -> List[str]:
        """Copy of the current order."""
        return list(self._names)

    @property
    def primary(self) -> str:
        """The active base ruleset ("" if the list is empty)."""
        return self._names[0] if self._names else ""

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def __getitem__(self, index: int) -> str:
        return self._names[index]

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __eq__(self, other: object) -> bool:
        if isinstance(other, RulesetList):
            return self._names == other._names
        if isinstance(other, list):
            return self._names == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"RulesetList({self._names!r})"

    def add(self, name: str) -> None:
        """Append a ruleset if not already present."""
        if name not in self._names:
            self._names.append(name)

    def remove(self, name: str) -> None:
        """Remove a ruleset if present."""
        if name in self._names:
            self._names.remove(name)

    def move_up(self, name: str) -> bool:
        """Move ruleset towards the front of the list.

        Returns:
            True if moved, False if already first or not found.
        """
        try:
            index = self._names.index(name)
        except ValueError:
            return False
        if index == 0:
            return False
        self._names[index], self._names[index - 1] = (
            self._names[index - 1],
            self._names[index],
        )
        return True

    def move_down(self, name: str) -> bool:
        """Move ruleset towards the end of the list.

        Returns:
            True if moved, False if already last or not found.
        """
        try:
            index = self._names.index(name)
        except ValueError:
            return False
        if index >= len(self._names) - 1:
            return False
        self._names[index], self._names[index + 1] = (
            self._names[index + 1],
            self._names[index],
        )
        return True

    def set_priority(self, name: str, new_index: int) -> bool:
        """Move ruleset to a specific position (0 = base ruleset).

        Returns:
            True if moved, False if not found, index invalid or unchanged.
        """
        try:
            old_index = self._names.index(name)
        except ValueError:
            return False
        if not 0 <= new_index < len(self._names) or old_index == new_index:
            return False
        self._names.insert(new_index, self._names.pop(old_index))
        return True

    def priority_of(self, name: str) -> int:
        """Position of a ruleset, or -1 if it is not in the list."""
        try:
            return self._names.index(name)
        except ValueError:
            return -1
