"""
Value Objects for Domain Layer.

Value objects are immutable objects that describe the outcome of a
validation sweep. They carry no behavior beyond construction and read
access.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple


class IssueKind(str, Enum):
    """Classification of a single data defect."""

    MISSING_KEY = "missing_key"
    WRONG_TYPE = "wrong_type"
    WRONG_ELEMENT_TYPE = "wrong_element_type"
    INVALID_ENUM_VALUE = "invalid_enum_value"
    MISSING_SUB_KEY = "missing_sub_key"
    WRONG_SUB_KEY_TYPE = "wrong_sub_key_type"


@dataclass(frozen=True)
class ValidationIssue:
    """One defect found in one record."""

    kind: IssueKind
    field: str
    message: str
    record_index: int
    # Sub-key for stats, 1-based position for types
    detail: Optional[str] = None


class ValidationResult:
    """
    Immutable report of a validation sweep.

    Every accessor returns a fresh list so callers cannot reach the
    validator's internal state through the result.
    """

    __slots__ = ("_is_fine", "_passed", "_failed", "_issues")

    def __init__(
        self,
        is_fine: bool,
        passed_records: Sequence[Any],
        failed_records: Sequence[Any],
        issues: Sequence[ValidationIssue],
    ) -> None:
        self._is_fine = is_fine
        self._passed: Tuple[Any, ...] = tuple(passed_records)
        self._failed: Tuple[Any, ...] = tuple(failed_records)
        self._issues: Tuple[ValidationIssue, ...] = tuple(issues)

    @property
    def is_fine(self) -> bool:
        """True iff no record failed."""
        return self._is_fine

    @property
    def passed_records(self) -> List[Any]:
        return list(self._passed)

    @property
    def failed_records(self) -> List[Any]:
        return list(self._failed)

    @property
    def error_messages(self) -> List[str]:
        """Messages in emission order."""
        return [issue.message for issue in self._issues]

    @property
    def issues(self) -> List[ValidationIssue]:
        return list(self._issues)

    @property
    def passed_count(self) -> int:
        return len(self._passed)

    @property
    def failed_count(self) -> int:
        return len(self._failed)

    def __repr__(self) -> str:
        return (
            f"ValidationResult(is_fine={self._is_fine}, "
            f"passed={len(self._passed)}, failed={len(self._failed)}, "
            f"messages={len(self._issues)})"
        )
