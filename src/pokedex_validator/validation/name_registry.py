"""
Name Registry - Accumulated index of validated names.

The registry outlives individual validation sweeps: every name whose own
type check passed is appended, in first-seen order, without
deduplication. Share one registry between validators to build a single
master index; give each concurrent caller its own.
"""

from __future__ import annotations

from typing import List


class NameRegistry:
    """Append-only list of names seen across validation sweeps."""

    def __init__(self) -> None:
        self._names: List[str] = []

    def register(self, name: str) -> None:
        self._names.append(name)

    @property
    def names(self) -> List[str]:
        """Copy of the registered names in first-seen order."""
        return list(self._names)

    def sorted_names(self) -> List[str]:
        return sorted(self._names)
