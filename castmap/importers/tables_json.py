# castmap/importers/tables_json.py

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from .tables_csv import TABLE_COLUMNS


def parse_tables_json(path: str | Path) -> Dict[str, Any]:
    """
    Parse a JSON document holding the four tables.

    Expected schema (every key optional, missing tables are empty):
    {
      "people":  [ { "id": int, "name": str, "pictureURL": str, "bio": str,
                     "arrived": int, "deactivated": int }, ... ],
      "friends": [ { "friend_1": int, "friend_2": int, "episode": int,
                     "emoji": str, "context": str, "imageURL": str }, ... ],
      "enemies": [ { "enemy_1": int, "enemy_2": int, "emoji": str, "context": str }, ... ],
      "pairs":   [ { "pair_1": int, "pair_2": int, "episode": int }, ... ]
    }
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))

    with open(p, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError("JSON root must be an object")

    for table in TABLE_COLUMNS:
        value = data.setdefault(table, [])
        if not isinstance(value, list):
            raise ValueError(f"'{table}' must be an array")

    return data
