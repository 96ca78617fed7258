"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any, Callable, Dict, Sequence

import pytest

from pokedex_validator.validation.name_registry import NameRegistry
from pokedex_validator.validation.pokemon_validator import PokemonDataValidator

VALID_RECORD: Dict[str, Any] = {
    "no": 1,
    "name": "Test",
    "form": "",
    "isMegaEvolution": False,
    "evolutions": [],
    "types": ["ほのお"],
    "abilities": [],
    "hiddenAbilities": [],
    "stats": {
        "hp": 1,
        "attack": 1,
        "defence": 1,
        "spAttack": 1,
        "spDefence": 1,
        "speed": 1,
    },
}


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding data and config fixtures."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_config_path(fixtures_dir: Path) -> Path:
    """Path to sample configuration file."""
    return fixtures_dir / "sample_config.yaml"


@pytest.fixture
def sample_data_path(fixtures_dir: Path) -> Path:
    """Path to sample data file with one broken record."""
    return fixtures_dir / "pokemon_data.json"


@pytest.fixture
def make_record() -> Callable[..., Dict[str, Any]]:
    """
    Factory for records derived from a well-formed one.

    Keyword arguments override fields; pass drop=[...] to remove fields.
    """

    def _make(drop: Sequence[str] = (), **overrides: Any) -> Dict[str, Any]:
        record = copy.deepcopy(VALID_RECORD)
        record.update(overrides)
        for key in drop:
            record.pop(key, None)
        return record

    return _make


@pytest.fixture
def valid_record(make_record: Callable[..., Dict[str, Any]]) -> Dict[str, Any]:
    """A single well-formed record."""
    return make_record()


@pytest.fixture
def validator() -> PokemonDataValidator:
    """Validator with default configuration."""
    return PokemonDataValidator()


@pytest.fixture
def name_registry() -> NameRegistry:
    """Fresh name registry."""
    return NameRegistry()


@pytest.fixture
def write_json(tmp_path: Path) -> Callable[[Any, str], Path]:
    """Write a JSON document into tmp_path and return its path."""

    def _write(data: Any, filename: str = "data.json") -> Path:
        path = tmp_path / filename
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write
