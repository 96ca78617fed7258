"""
Console Reporter.

Prints a validation result to the console.
"""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from pokedex_validator.domain.value_objects import ValidationResult


class ConsoleReporter:
    """Simple console-based result reporter."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        err_stream: Optional[TextIO] = None,
        max_messages: Optional[int] = None,
    ) -> None:
        """
        Initialize console reporter.

        Args:
            stream: Output for the summary (default: stdout)
            err_stream: Output for error messages (default: stderr)
            max_messages: Print at most this many error messages
        """
        self._stream = stream
        self._err_stream = err_stream
        self._max_messages = max_messages

    def report(self, result: ValidationResult) -> None:
        """Print error messages and the passed/failed counts."""
        if result.is_fine:
            self._out("正常です。エラーはありませんでした。")
        else:
            errors = result.error_messages
            self._err(f"{len(errors)}件のエラー。")
            shown = errors if self._max_messages is None else errors[: self._max_messages]
            for message in shown:
                self._err(message)
            if len(shown) < len(errors):
                self._err(f"...他{len(errors) - len(shown)}件")

        self._out(f"正常なポケモンデータ：{result.passed_count}件")
        self._out(f"異常のあったポケモンデータ：{result.failed_count}件")

    def report_names(self, names: Iterable[str]) -> None:
        """Print collected names, one per line, in the given order."""
        ordered = list(names)
        self._out(f"登録ポケモン名：{len(ordered)}件")
        for name in ordered:
            self._out(name)

    def _out(self, message: str) -> None:
        print(message, file=self._stream or sys.stdout)

    def _err(self, message: str) -> None:
        print(message, file=self._err_stream or sys.stderr)
