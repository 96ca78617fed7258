"""
Core Domain Entities.

This module defines the fixed record schema the validator checks against:
the expected value kinds, the recognized Pokémon types and the required
stats sub-keys.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, FrozenSet, List, Optional, Tuple


class ValueKind(str, Enum):
    """Kind of value expected for a record field."""

    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"

    def matches(self, value: Any) -> bool:
        """Check whether a decoded JSON value is of this kind."""
        if value is None:
            return False
        if self is ValueKind.NUMBER:
            # bool is an int subclass but never a number here
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        if self is ValueKind.STRING:
            return isinstance(value, str)
        if self is ValueKind.BOOLEAN:
            return isinstance(value, bool)
        if self is ValueKind.ARRAY:
            return isinstance(value, (list, tuple))
        return isinstance(value, Mapping)


class PokemonType(str, Enum):
    """Recognized Pokémon types."""

    NORMAL = "ノーマル"
    FIRE = "ほのお"
    WATER = "みず"
    ELECTRIC = "でんき"
    GRASS = "くさ"
    ICE = "こおり"
    FIGHTING = "かくとう"
    POISON = "どく"
    GROUND = "じめん"
    FLYING = "ひこう"
    PSYCHIC = "エスパー"
    BUG = "むし"
    ROCK = "いわ"
    GHOST = "ゴースト"
    DRAGON = "ドラゴン"
    DARK = "あく"
    STEEL = "はがね"
    FAIRY = "フェアリー"
    # Single-typed Pokémon may carry an empty second slot
    NONE = ""

    @classmethod
    def is_valid(cls, value: Any) -> bool:
        return isinstance(value, str) and value in _TYPE_NAMES


_TYPE_NAMES: FrozenSet[str] = frozenset(t.value for t in PokemonType)


# (field, expected kind, expected element kind) in check order
FieldSpec = Tuple[str, ValueKind, Optional[ValueKind]]

SCALAR_FIELDS: List[FieldSpec] = [
    ("no", ValueKind.NUMBER, None),
    ("name", ValueKind.STRING, None),
    ("form", ValueKind.STRING, None),
    ("isMegaEvolution", ValueKind.BOOLEAN, None),
    ("evolutions", ValueKind.ARRAY, ValueKind.NUMBER),
]

TYPES_FIELD: FieldSpec = ("types", ValueKind.ARRAY, ValueKind.STRING)

ABILITY_FIELDS: List[FieldSpec] = [
    ("abilities", ValueKind.ARRAY, ValueKind.STRING),
    ("hiddenAbilities", ValueKind.ARRAY, ValueKind.STRING),
]

STATS_FIELD: FieldSpec = ("stats", ValueKind.OBJECT, None)

STAT_KEYS: Tuple[str, ...] = (
    "hp",
    "attack",
    "defence",
    "spAttack",
    "spDefence",
    "speed",
)
