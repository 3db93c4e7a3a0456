"""The four source tables, loaded once per session."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

import kuzu

from . import crud
from .models import Enmity, Friendship, Pairing, Person

logger = logging.getLogger(__name__)


def _opt_int(value: Any) -> Optional[int]:
    if value is None:
        return None
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        if value == "" or value.lower() in ("none", "nan", "null"):
            return None
    return int(value)


def _opt_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    return str(value)


def _rows(data: Dict[str, Any], table: str, build: Callable[[dict], Any]) -> tuple:
    out = []
    for i, row in enumerate(data.get(table) or [], start=1):
        if not isinstance(row, dict):
            logger.warning("%s row %d: expected an object, skipped", table, i)
            continue
        try:
            out.append(build(row))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("%s row %d skipped: %r", table, i, e)
    return tuple(out)


@dataclass(frozen=True)
class EntityStore:
    people: Tuple[Person, ...] = ()
    friendships: Tuple[Friendship, ...] = ()
    enmities: Tuple[Enmity, ...] = ()
    pairings: Tuple[Pairing, ...] = ()

    @classmethod
    def empty(cls) -> "EntityStore":
        return cls()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EntityStore":
        """
        Build a store from the source table layout:
          {"people": [{"id", "name", "pictureURL", "bio", "arrived", "deactivated"}],
           "friends": [{"friend_1", "friend_2", "emoji", "context", "episode", "imageURL"}],
           "enemies": [{"enemy_1", "enemy_2", "emoji", "context"}],
           "pairs":   [{"pair_1", "pair_2", "episode"}]}
        Missing tables are empty; rows lacking a required column are skipped.
        """
        people = _rows(data, "people", lambda r: Person(
            id=int(r["id"]),
            name=str(r["name"]),
            picture_url=_opt_str(r.get("pictureURL")),
            bio=_opt_str(r.get("bio")),
            arrived=_opt_int(r.get("arrived")),
            deactivated=_opt_int(r.get("deactivated")),
        ))
        friendships = _rows(data, "friends", lambda r: Friendship(
            person_a=int(r["friend_1"]),
            person_b=int(r["friend_2"]),
            episode=int(r["episode"]),
            emoji=_opt_str(r.get("emoji")),
            context=_opt_str(r.get("context")),
            image_url=_opt_str(r.get("imageURL")),
        ))
        enmities = _rows(data, "enemies", lambda r: Enmity(
            person_a=int(r["enemy_1"]),
            person_b=int(r["enemy_2"]),
            emoji=_opt_str(r.get("emoji")),
            context=_opt_str(r.get("context")),
        ))
        pairings = _rows(data, "pairs", lambda r: Pairing(
            person_a=int(r["pair_1"]),
            person_b=int(r["pair_2"]),
            episode=int(r["episode"]),
        ))
        return cls(people, friendships, enmities, pairings)


def load_store(conn: kuzu.Connection) -> EntityStore:
    """Read all four tables. A table that cannot be read is loaded as empty."""
    def _load(name, fn):
        try:
            return tuple(fn(conn))
        except RuntimeError as e:
            logger.warning("Could not load %s, using empty table: %s", name, e)
            return ()

    store = EntityStore(
        people=_load("people", crud.list_people),
        friendships=_load("friendships", crud.list_friendships),
        enmities=_load("enmities", crud.list_enmities),
        pairings=_load("pairings", crud.list_pairings),
    )
    logger.info(
        "Entity store loaded: %d people, %d friendships, %d enmities, %d pairings",
        len(store.people), len(store.friendships), len(store.enmities), len(store.pairings),
    )
    return store
