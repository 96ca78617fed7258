"""
Domain Layer - Record Schema and Validation Report.

Entities:
    - ValueKind: Expected kind of a record field value
    - PokemonType: Closed enumeration of recognized types
    - Field tables: Fixed schema, in check order

Value Objects:
    - ValidationResult: Immutable report of a validation sweep
    - ValidationIssue: One tagged data defect
    - IssueKind: Classification of defects

Design Principles:
    - Immutable reports
    - No infrastructure dependencies
"""

from pokedex_validator.domain.entities import (
    ABILITY_FIELDS,
    SCALAR_FIELDS,
    STAT_KEYS,
    STATS_FIELD,
    TYPES_FIELD,
    PokemonType,
    ValueKind,
)
from pokedex_validator.domain.value_objects import (
    IssueKind,
    ValidationIssue,
    ValidationResult,
)

__all__ = [
    "ABILITY_FIELDS",
    "SCALAR_FIELDS",
    "STAT_KEYS",
    "STATS_FIELD",
    "TYPES_FIELD",
    "PokemonType",
    "ValueKind",
    "IssueKind",
    "ValidationIssue",
    "ValidationResult",
]
