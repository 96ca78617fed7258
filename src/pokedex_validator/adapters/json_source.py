"""
JSON Record Source.

Reads the record list from a JSON file. The validator itself never touches
storage; this adapter decodes the file and hands over plain records.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

logger = logging.getLogger(__name__)


class RecordSourceError(Exception):
    """Raised when the record file cannot be read or decoded."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


class JsonRecordSource:
    """Loads records from a JSON array file."""

    def __init__(self, path: Union[str, Path], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def load(self) -> List[Any]:
        """
        Load all records.

        Returns:
            Records in file order

        Raises:
            RecordSourceError: If the file is missing or unreadable, cannot
                               be decoded, is not JSON, or its top level
                               is not an array
        """
        try:
            with open(self.path, encoding=self.encoding) as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise RecordSourceError(f"Data file not found: {self.path}", self.path) from e
        except json.JSONDecodeError as e:
            raise RecordSourceError(
                f"Invalid JSON in {self.path}: line {e.lineno}: {e.msg}", self.path
            ) from e
        except UnicodeDecodeError as e:
            raise RecordSourceError(
                f"Cannot decode {self.path} as {self.encoding}: {e.reason}", self.path
            ) from e
        except LookupError as e:
            raise RecordSourceError(f"Unknown encoding: {self.encoding}", self.path) from e
        except OSError as e:
            raise RecordSourceError(
                f"Cannot read data file {self.path}: {e.strerror or e}", self.path
            ) from e

        if not isinstance(data, list):
            raise RecordSourceError(
                f"Expected a JSON array in {self.path}, got {type(data).__name__}",
                self.path,
            )

        logger.info(f"Loaded {len(data)} records from {self.path}")
        return data


def sample_records() -> List[dict]:
    """Built-in sample of two well-formed records."""
    return [
        {
            "no": 75,
            "name": "ゴローン",
            "form": "アローラのすがた",
            "isMegaEvolution": False,
            "evolutions": [76],
            "types": ["いわ", "でんき"],
            "abilities": ["じりょく", "がんじょう"],
            "hiddenAbilities": ["エレキスキン"],
            "stats": {
                "hp": 40,
                "attack": 80,
                "defence": 100,
                "spAttack": 30,
                "spDefence": 30,
                "speed": 20,
            },
        },
        {
            "no": 79,
            "name": "ヤドン",
            "form": "アローラのすがた",
            "isMegaEvolution": False,
            "evolutions": [80, 199],
            "types": ["みず", "エスパー"],
            "abilities": ["どんかん", "マイペース"],
            "hiddenAbilities": ["さいせいりょく"],
            "stats": {
                "hp": 90,
                "attack": 65,
                "defence": 65,
                "spAttack": 40,
                "spDefence": 40,
                "speed": 15,
            },
        },
    ]
