"""Person and relation CRUD against KuzuDB."""
from __future__ import annotations

import kuzu

from .models import Enmity, Friendship, Pairing, Person


def _props(values: dict) -> tuple[str, dict]:
    """Cypher property map for the non-None values (NULLs are left unset)."""
    params = {k: v for k, v in values.items() if v is not None}
    body = ", ".join(f"{k}: ${k}" for k in params)
    return "{" + body + "}", params


def _person_exists(conn: kuzu.Connection, person_id: int) -> bool:
    result = conn.execute(
        "MATCH (p:Person) WHERE p.id = $id RETURN count(*)",
        {"id": person_id}
    )
    return result.has_next() and result.get_next()[0] > 0


def _next_seq(conn: kuzu.Connection, rel_table: str) -> int:
    result = conn.execute(f"MATCH ()-[r:{rel_table}]->() RETURN max(r.seq)")
    top = result.get_next()[0] if result.has_next() else None
    return (top or 0) + 1


# ── People ──

def create_person(conn: kuzu.Connection, person_id: int, name: str,
                  picture_url: str | None = None, bio: str | None = None,
                  arrived: int | None = None, deactivated: int | None = None) -> Person:
    if _person_exists(conn, person_id):
        raise ValueError(f"Person {person_id} already exists")
    props, params = _props({
        "id": person_id, "name": name, "picture_url": picture_url, "bio": bio,
        "arrived": arrived, "deactivated": deactivated,
    })
    conn.execute(f"CREATE (p:Person {props})", params)
    return Person(person_id, name, picture_url, bio, arrived, deactivated)


def get_person(conn: kuzu.Connection, person_id: int) -> Person | None:
    result = conn.execute(
        "MATCH (p:Person) WHERE p.id = $id "
        "RETURN p.id, p.name, p.picture_url, p.bio, p.arrived, p.deactivated",
        {"id": person_id}
    )
    if result.has_next():
        return Person(*result.get_next())
    return None


def list_people(conn: kuzu.Connection) -> list[Person]:
    result = conn.execute(
        "MATCH (p:Person) "
        "RETURN p.id, p.name, p.picture_url, p.bio, p.arrived, p.deactivated "
        "ORDER BY p.id"
    )
    people = []
    while result.has_next():
        people.append(Person(*result.get_next()))
    return people


# ── Relations ──

def _create_rel(conn: kuzu.Connection, rel_table: str, a: int, b: int, values: dict) -> None:
    for pid in (a, b):
        if not _person_exists(conn, pid):
            raise ValueError(f"Unknown person id {pid}")
    props, params = _props({"seq": _next_seq(conn, rel_table), **values})
    params.update({"a": a, "b": b})
    conn.execute(
        f"MATCH (a:Person), (b:Person) WHERE a.id = $a AND b.id = $b "
        f"CREATE (a)-[:{rel_table} {props}]->(b)",
        params
    )


def create_friendship(conn: kuzu.Connection, person_a: int, person_b: int, episode: int,
                      emoji: str | None = None, context: str | None = None,
                      image_url: str | None = None) -> Friendship:
    _create_rel(conn, "FRIEND_OF", person_a, person_b, {
        "episode": episode, "emoji": emoji, "context": context, "image_url": image_url,
    })
    return Friendship(person_a, person_b, episode, emoji, context, image_url)


def create_enmity(conn: kuzu.Connection, person_a: int, person_b: int,
                  emoji: str | None = None, context: str | None = None) -> Enmity:
    _create_rel(conn, "ENEMY_OF", person_a, person_b, {"emoji": emoji, "context": context})
    return Enmity(person_a, person_b, emoji, context)


def create_pairing(conn: kuzu.Connection, person_a: int, person_b: int, episode: int) -> Pairing:
    _create_rel(conn, "PAIRED_WITH", person_a, person_b, {"episode": episode})
    return Pairing(person_a, person_b, episode)


def list_friendships(conn: kuzu.Connection) -> list[Friendship]:
    result = conn.execute(
        "MATCH (a:Person)-[r:FRIEND_OF]->(b:Person) "
        "RETURN a.id, b.id, r.episode, r.emoji, r.context, r.image_url "
        "ORDER BY r.seq"
    )
    rows = []
    while result.has_next():
        rows.append(Friendship(*result.get_next()))
    return rows


def list_enmities(conn: kuzu.Connection) -> list[Enmity]:
    result = conn.execute(
        "MATCH (a:Person)-[r:ENEMY_OF]->(b:Person) "
        "RETURN a.id, b.id, r.emoji, r.context "
        "ORDER BY r.seq"
    )
    rows = []
    while result.has_next():
        rows.append(Enmity(*result.get_next()))
    return rows


def list_pairings(conn: kuzu.Connection) -> list[Pairing]:
    result = conn.execute(
        "MATCH (a:Person)-[r:PAIRED_WITH]->(b:Person) "
        "RETURN a.id, b.id, r.episode "
        "ORDER BY r.seq"
    )
    rows = []
    while result.has_next():
        rows.append(Pairing(*result.get_next()))
    return rows
