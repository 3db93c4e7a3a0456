from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List

import pandas as pd

# Column layout of each table export
TABLE_COLUMNS: Dict[str, List[str]] = {
    "people": ["id", "name", "pictureURL", "bio", "arrived", "deactivated"],
    "friends": ["friend_1", "friend_2", "emoji", "context", "episode", "imageURL"],
    "enemies": ["enemy_1", "enemy_2", "emoji", "context"],
    "pairs": ["pair_1", "pair_2", "episode"],
}

REQUIRED_COLUMNS: Dict[str, set] = {
    "people": {"id", "name"},
    "friends": {"friend_1", "friend_2", "episode"},
    "enemies": {"enemy_1", "enemy_2"},
    "pairs": {"pair_1", "pair_2", "episode"},
}


def read_table_csv(path: str | Path, table: str) -> List[Dict[str, Any]]:
    """
    Read one table export (CSV) into a list of row dicts.
    Empty cells become None. Supports comment lines starting with '#'.
    """
    if table not in TABLE_COLUMNS:
        raise ValueError(f"Unknown table {table!r}; expected one of {sorted(TABLE_COLUMNS)}")

    df = pd.read_csv(path, comment="#")
    df.columns = [str(c).strip() for c in df.columns]

    missing = REQUIRED_COLUMNS[table] - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)} in file {path}")

    keep = [c for c in TABLE_COLUMNS[table] if c in df.columns]
    df = df[keep].astype(object)
    df = df.where(pd.notna(df), None)

    rows: List[Dict[str, Any]] = []
    for rec in df.to_dict(orient="records"):
        rows.append({k: (v.strip() if isinstance(v, str) else v) for k, v in rec.items()})
    return rows


def load_tables_dir(directory: str | Path) -> Dict[str, List[Dict[str, Any]]]:
    """Read <table>.csv for every table in `directory`; absent files give empty tables."""
    d = Path(directory)
    if not d.is_dir():
        raise FileNotFoundError(str(d))

    data: Dict[str, List[Dict[str, Any]]] = {}
    for table in TABLE_COLUMNS:
        path = d / f"{table}.csv"
        data[table] = read_table_csv(path, table) if path.exists() else []
    return data
