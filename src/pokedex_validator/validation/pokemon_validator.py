"""
Pokémon Data Validator - Validate Creature Records Against the Schema.

Checks every record of a list independently:
    - Required keys present with the expected value kind
    - Array fields hold elements of the expected kind
    - Types belong to the closed type enumeration
    - Stats object carries all six sub-keys

Design Notes:
    - Bad data is reported, never raised
    - All field checks run; nested checks short-circuit on a bad container
    - Error log is reset per sweep, the name registry is not
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from pokedex_validator.config.models import ValidatorConfig
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
from pokedex_validator.validation.name_registry import NameRegistry
from pokedex_validator.validation.record_access import (
    MISSING,
    format_number,
    get_str,
    get_value,
    has_key,
)

logger = logging.getLogger(__name__)


def build_error_message(record: Any, message: str) -> str:
    """
    Prefix a message with the record's catalog number and display name.

    Args:
        record: Record the message is about
        message: Message body

    Returns:
        "No.<no> <name>[（<form>）]: <message>"
    """
    no = get_value(record, "no")
    no_text = "???" if no is MISSING or no is None else format_number(no)
    name = get_str(record, "name", "???")
    form = get_str(record, "form", "")
    full_name = f"{name}（{form}）" if form != "" else name

    return f"No.{no_text} {full_name}: {message}"


class PokemonDataValidator:
    """
    Validates lists of Pokémon records.

    One instance must not be shared between threads: the error log and
    the name registry are mutable instance state.
    """

    def __init__(
        self,
        config: Optional[ValidatorConfig] = None,
        name_registry: Optional[NameRegistry] = None,
    ) -> None:
        """
        Initialize validator.

        Args:
            config: Validation configuration
            name_registry: Accumulator for validated names. A new one is
                           created when omitted.
        """
        self.config = config or ValidatorConfig()
        self.name_registry = name_registry if name_registry is not None else NameRegistry()
        self._issues: List[ValidationIssue] = []
        self._record_index = 0

    @property
    def name_list(self) -> List[str]:
        """All names that passed their type check, across every sweep."""
        return self.name_registry.names

    def validate(self, records: Iterable[Any]) -> ValidationResult:
        """
        Validate a list of records.

        Args:
            records: Ordered records, each a decoded JSON object

        Returns:
            ValidationResult partitioning the records

        Raises:
            TypeError: If records is not iterable
        """
        self._issues = []
        passed: List[Any] = []
        failed: List[Any] = []

        for index, record in enumerate(records):
            self._record_index = index
            before = len(self._issues)
            if self._validate_pokemon(record):
                passed.append(record)
            else:
                failed.append(record)
                logger.debug(
                    f"Record #{index} failed with "
                    f"{len(self._issues) - before} issue(s)"
                )

        result = ValidationResult(
            is_fine=len(failed) == 0,
            passed_records=passed,
            failed_records=failed,
            issues=list(self._issues),
        )
        self._log_result(result)
        return result

    def _validate_pokemon(self, record: Any) -> bool:
        """Run every field check on one record."""
        validations: List[bool] = []

        for key, kind, element_kind in SCALAR_FIELDS:
            validations.append(
                self._validate_key_and_value_type(record, key, kind, element_kind)
            )
        validations.append(self._validate_types(record))
        for key, kind, element_kind in ABILITY_FIELDS:
            validations.append(
                self._validate_key_and_value_type(record, key, kind, element_kind)
            )
        validations.append(self._validate_stats(record))

        return all(validations)

    def _validate_key_and_value_type(
        self,
        record: Any,
        key: str,
        expected: ValueKind,
        expected_element: Optional[ValueKind] = None,
    ) -> bool:
        """Check presence and kind of one field."""
        if not has_key(record, key):
            self._add_issue(
                record,
                IssueKind.MISSING_KEY,
                key,
                f'{expected.value}型のキー"{key}"が存在しません。',
            )
            return False

        value = get_value(record, key)
        if expected is ValueKind.ARRAY:
            return self._validate_array(record, key, value, expected_element)

        if not expected.matches(value):
            self._add_issue(
                record,
                IssueKind.WRONG_TYPE,
                key,
                f'"{key}"の値は{expected.value}である必要があります。',
            )
            return False

        if key == "name":
            self.name_registry.register(value)
        return True

    def _validate_array(
        self,
        record: Any,
        key: str,
        value: Any,
        expected_element: Optional[ValueKind],
    ) -> bool:
        """Check a value is an array whose elements share one kind."""
        if not ValueKind.ARRAY.matches(value):
            self._add_issue(
                record,
                IssueKind.WRONG_TYPE,
                key,
                f'"{key}"の値はarrayである必要があります。',
            )
            return False

        if expected_element is None:
            return True

        if not all(expected_element.matches(element) for element in value):
            self._add_issue(
                record,
                IssueKind.WRONG_ELEMENT_TYPE,
                key,
                f'array"{key}"の要素は全て{expected_element.value}である必要があります。',
            )
            return False
        return True

    def _validate_types(self, record: Any) -> bool:
        """Check every entry of "types" is a recognized type."""
        key, kind, element_kind = TYPES_FIELD
        if not self._validate_key_and_value_type(record, key, kind, element_kind):
            return False

        is_passed = True
        for position, type_name in enumerate(get_value(record, key), start=1):
            if not PokemonType.is_valid(type_name):
                self._add_issue(
                    record,
                    IssueKind.INVALID_ENUM_VALUE,
                    key,
                    f'type{position}:"{type_name}"は存在しないタイプです。',
                    detail=str(position),
                )
                is_passed = False
        return is_passed

    def _validate_stats(self, record: Any) -> bool:
        """Check the stats object carries all six sub-keys."""
        key, kind, _ = STATS_FIELD
        if not self._validate_key_and_value_type(record, key, kind):
            return False

        stats = get_value(record, key)
        is_passed = True
        for stat in STAT_KEYS:
            if stat not in stats:
                self._add_issue(
                    record,
                    IssueKind.MISSING_SUB_KEY,
                    key,
                    f'オブジェクト"stats"内に数値"{stat}"が存在しません。',
                    detail=stat,
                )
                is_passed = False
            elif self.config.strict_stats and not ValueKind.NUMBER.matches(stats[stat]):
                self._add_issue(
                    record,
                    IssueKind.WRONG_SUB_KEY_TYPE,
                    key,
                    f'オブジェクト"stats"内の"{stat}"の値はnumberである必要があります。',
                    detail=stat,
                )
                is_passed = False
        return is_passed

    def _add_issue(
        self,
        record: Any,
        kind: IssueKind,
        field: str,
        message: str,
        detail: Optional[str] = None,
    ) -> None:
        self._issues.append(
            ValidationIssue(
                kind=kind,
                field=field,
                message=build_error_message(record, message),
                record_index=self._record_index,
                detail=detail,
            )
        )

    def _log_result(self, result: ValidationResult) -> None:
        """Log sweep summary."""
        if result.is_fine:
            logger.info(f"Validation passed: {result.passed_count} records")
        else:
            logger.warning(
                f"Validation failed: {result.failed_count} of "
                f"{result.passed_count + result.failed_count} records, "
                f"{len(result.issues)} messages"
            )
