from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Tuple

import kuzu

from .. import crud
from ..db import get_database
from ..store import EntityStore
from .tables_csv import load_tables_dir
from .tables_json import parse_tables_json

logger = logging.getLogger(__name__)


def load_source(path: str | Path) -> EntityStore:
    """A directory of CSV exports, or a single .json document."""
    p = Path(path)
    if p.is_dir():
        return EntityStore.from_dict(load_tables_dir(p))
    if p.suffix.lower() == ".json":
        return EntityStore.from_dict(parse_tables_json(p))
    raise ValueError(f"Unsupported source: {p}. Use a directory of CSV files or a .json file")


def import_store(conn: kuzu.Connection, store: EntityStore) -> Tuple[Dict[str, int], List[str]]:
    """
    Write a store into the database. People that already exist and relations
    that reference unknown people are skipped with a warning.
    """
    counts = {"people": 0, "friendships": 0, "enmities": 0, "pairings": 0}
    warnings: List[str] = []

    for p in store.people:
        try:
            crud.create_person(conn, p.id, p.name, p.picture_url, p.bio, p.arrived, p.deactivated)
            counts["people"] += 1
        except ValueError as e:
            warnings.append(f"Person {p.id}: {e}")

    for i, f in enumerate(store.friendships, start=1):
        try:
            crud.create_friendship(conn, f.person_a, f.person_b, f.episode,
                                   f.emoji, f.context, f.image_url)
            counts["friendships"] += 1
        except ValueError as e:
            warnings.append(f"Friendship {i}: {e}")

    for i, e in enumerate(store.enmities, start=1):
        try:
            crud.create_enmity(conn, e.person_a, e.person_b, e.emoji, e.context)
            counts["enmities"] += 1
        except ValueError as err:
            warnings.append(f"Enmity {i}: {err}")

    for i, pr in enumerate(store.pairings, start=1):
        try:
            crud.create_pairing(conn, pr.person_a, pr.person_b, pr.episode)
            counts["pairings"] += 1
        except ValueError as e:
            warnings.append(f"Pairing {i}: {e}")

    for w in warnings:
        logger.warning("Import skipped: %s", w)
    logger.info("Import complete: %s", counts)
    return counts, warnings


def main() -> None:
    parser = argparse.ArgumentParser(description="Import cast tables into the graph database")
    parser.add_argument("source", help="Directory with people/friends/enemies/pairs .csv, or a .json file")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    source = Path(args.source)
    if not source.exists():
        raise SystemExit(f"File not found: {source}")

    try:
        store = load_source(source)
    except ValueError as e:
        raise SystemExit(str(e))

    conn = kuzu.Connection(get_database())
    counts, warnings = import_store(conn, store)

    if warnings:
        print("\n⚠️  IMPORT WARNINGS:")
        for warning in warnings:
            print(f"  - {warning}")
        print()

    print(f"Import complete: {counts['people']} people, {counts['friendships']} friendships, "
          f"{counts['enmities']} enmities, {counts['pairings']} pairings")


if __name__ == "__main__":
    main()
