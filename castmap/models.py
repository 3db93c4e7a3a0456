from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional, Tuple


class EdgeKind(enum.Enum):
    FRIEND = "friend"
    ENEMY = "enemy"


# ── Raw entities (one row of a source table) ──

@dataclass(frozen=True)
class Person:
    id: int
    name: str
    picture_url: Optional[str] = None
    bio: Optional[str] = None
    arrived: Optional[int] = None
    deactivated: Optional[int] = None


@dataclass(frozen=True)
class Friendship:
    person_a: int
    person_b: int
    episode: int
    emoji: Optional[str] = None
    context: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class Enmity:
    person_a: int
    person_b: int
    emoji: Optional[str] = None
    context: Optional[str] = None


@dataclass(frozen=True)
class Pairing:
    person_a: int
    person_b: int
    episode: int


# ── Derived model (handed to the render boundary) ──

@dataclass(frozen=True)
class DerivedNode:
    id: str
    label: str
    picture_url: Optional[str] = None
    bio: Optional[str] = None
    border_color: Optional[str] = None
    border_style: Optional[str] = None
    deactivated: Optional[int] = None
    is_inactive: bool = False


@dataclass(frozen=True)
class DerivedEdge:
    id: str
    source: str
    target: str
    kind: EdgeKind
    emoji: Optional[str] = None
    context: Optional[str] = None
    image_url: Optional[str] = None


@dataclass(frozen=True)
class DerivedGraph:
    """Nodes and edges visible in one episode.

    Edge ids are only unique within a single graph; two graphs derived from
    the same inputs compare equal, but ids must never be matched across
    graphs derived from different inputs.
    """
    episode: int
    nodes: Tuple[DerivedNode, ...] = field(default_factory=tuple)
    edges: Tuple[DerivedEdge, ...] = field(default_factory=tuple)

    def node(self, node_id: str) -> Optional[DerivedNode]:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def edge(self, edge_id: str) -> Optional[DerivedEdge]:
        for e in self.edges:
            if e.id == edge_id:
                return e
        return None

    def node_ids(self) -> set[str]:
        return {n.id for n in self.nodes}

    def dangling_edges(self) -> list[DerivedEdge]:
        """Edges with at least one endpoint outside this graph's node set."""
        ids = self.node_ids()
        return [e for e in self.edges if e.source not in ids or e.target not in ids]
