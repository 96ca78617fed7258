"""
Validation Package - Record Schema Validation.

This package provides:
    - PokemonDataValidator: Validate lists of Pokémon records
    - NameRegistry: Accumulated index of validated names

Design Principles:
    - Bad data is reported, not raised
    - Clear, actionable error messages
"""

from pokedex_validator.validation.name_registry import NameRegistry
from pokedex_validator.validation.pokemon_validator import (
    PokemonDataValidator,
    build_error_message,
)

__all__ = [
    "NameRegistry",
    "PokemonDataValidator",
    "build_error_message",
]
