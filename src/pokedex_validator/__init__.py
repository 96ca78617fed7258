"""
Pokédex Validator - Schema Validation for Pokémon Data Records.

Checks a list of decoded Pokémon records against a fixed schema,
partitions them into passed and failed records, and collects
human-readable error messages for every defect found.

Main Components:
    - domain: Schema tables, type enumeration, ValidationResult
    - validation: PokemonDataValidator and the NameRegistry accumulator
    - adapters: JSON record source and console reporter
    - config: Configuration models and loaders
    - cli: Command line entry point

Example:
    >>> from pokedex_validator.validation import PokemonDataValidator
    >>> validator = PokemonDataValidator()
    >>> result = validator.validate(records)
    >>> print(f"{len(result.failed_records)} records failed")

"""

import logging

__version__ = "1.0.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Pokédex Validator.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import pokedex_validator
        >>> pokedex_validator.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("pokedex_validator").setLevel(level)
