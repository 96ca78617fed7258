"""
Command line entry point.

Validates either a JSON data file or the built-in sample and prints the
report. Exit codes: 0 all records passed, 1 some records failed, 2 input
could not be read.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import click
import yaml
from pydantic import ValidationError

from pokedex_validator import configure_logging
from pokedex_validator.adapters.console_reporter import ConsoleReporter
from pokedex_validator.adapters.json_source import (
    JsonRecordSource,
    RecordSourceError,
    sample_records,
)
from pokedex_validator.config.loader import ConfigError, load_config
from pokedex_validator.validation.pokemon_validator import PokemonDataValidator

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_DATA = 1
EXIT_INPUT_ERROR = 2


def _collect_overrides(
    data_file: Optional[Path],
    strict_stats: Optional[bool],
    show_names: Optional[bool],
    sort_names: Optional[bool],
    max_messages: Optional[int],
    verbose: bool,
) -> Dict[str, Any]:
    """Turn command line options into a config overlay."""
    overrides: Dict[str, Any] = {}
    if data_file is not None:
        overrides.setdefault("input", {})["data_file"] = str(data_file)
    if strict_stats is not None:
        overrides.setdefault("validator", {})["strict_stats"] = strict_stats
    report: Dict[str, Any] = {}
    if show_names is not None:
        report["show_names"] = show_names
    if sort_names is not None:
        report["sort_names"] = sort_names
    if max_messages is not None:
        report["max_messages"] = max_messages
    if report:
        overrides["report"] = report
    if verbose:
        overrides["log_level"] = "DEBUG"
    return overrides


@click.command()
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="JSON file holding an array of records",
)
@click.option(
    "--sample",
    is_flag=True,
    default=False,
    help="Validate the built-in sample records instead of a file",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML configuration file",
)
@click.option(
    "--strict-stats/--no-strict-stats",
    default=None,
    help="Also require stats values to be numbers",
)
@click.option(
    "--show-names/--no-show-names",
    default=None,
    help="Print the validated names after the report",
)
@click.option(
    "--sort-names/--no-sort-names",
    default=None,
    help="Sort printed names",
)
@click.option(
    "--max-messages",
    type=click.IntRange(min=0),
    default=None,
    help="Print at most this many error messages",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging")
def main(
    data_file: Optional[Path],
    sample: bool,
    config_path: Optional[Path],
    strict_stats: Optional[bool],
    show_names: Optional[bool],
    sort_names: Optional[bool],
    max_messages: Optional[int],
    verbose: bool,
) -> None:
    """Validate Pokémon data records."""
    overrides = _collect_overrides(
        data_file, strict_stats, show_names, sort_names, max_messages, verbose
    )
    try:
        config = load_config(config_path, overrides)
    except (ValidationError, ConfigError, yaml.YAMLError) as e:
        click.echo(f"Invalid configuration: {e}", err=True)
        sys.exit(EXIT_INPUT_ERROR)

    configure_logging(getattr(logging, config.log_level))

    if sample:
        records = sample_records()
    else:
        source = JsonRecordSource(config.input.data_file, config.input.encoding)
        try:
            records = source.load()
        except RecordSourceError as e:
            logger.error(e.message)
            click.echo(e.message, err=True)
            sys.exit(EXIT_INPUT_ERROR)

    validator = PokemonDataValidator(config.validator)
    result = validator.validate(records)

    reporter = ConsoleReporter(max_messages=config.report.max_messages)
    reporter.report(result)
    if config.report.show_names:
        registry = validator.name_registry
        names = registry.sorted_names() if config.report.sort_names else registry.names
        reporter.report_names(names)

    sys.exit(EXIT_OK if result.is_fine else EXIT_INVALID_DATA)


if __name__ == "__main__":
    main()
