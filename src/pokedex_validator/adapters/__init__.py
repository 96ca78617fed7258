"""Infrastructure adapters: record sources and reporters."""

from pokedex_validator.adapters.console_reporter import ConsoleReporter
from pokedex_validator.adapters.json_source import (
    JsonRecordSource,
    RecordSourceError,
    sample_records,
)

__all__ = [
    "ConsoleReporter",
    "JsonRecordSource",
    "RecordSourceError",
    "sample_records",
]
