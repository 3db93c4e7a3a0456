"""Per-episode graph derivation and the cytoscape element adapter."""
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Sequence

from .colors import PALETTE, assign_colors
from .models import (
    DerivedEdge,
    DerivedGraph,
    DerivedNode,
    EdgeKind,
    Enmity,
    Friendship,
    Pairing,
    Person,
)

logger = logging.getLogger(__name__)

# Apply the friendship node-set rule to enemy edges as well
STRICT_ENEMIES = os.environ.get("CASTMAP_STRICT_ENEMIES", "").lower() in ("1", "true", "yes")


def _check_episode(episode) -> None:
    if isinstance(episode, bool) or not isinstance(episode, int):
        raise TypeError(f"episode must be an int, got {type(episode).__name__}")


def _build_nodes(people: Sequence[Person], episode: int, colors: dict[int, str]) -> List[DerivedNode]:
    nodes: List[DerivedNode] = []
    for p in people:
        if p.arrived is None or p.arrived > episode:
            continue
        color = colors.get(p.id)
        nodes.append(
            DerivedNode(
                id=str(p.id),
                label=p.name,
                picture_url=p.picture_url,
                bio=p.bio,
                border_color=color,
                border_style="solid" if color else None,
                deactivated=p.deactivated,
                is_inactive=p.deactivated is not None and p.deactivated <= episode,
            )
        )
    return nodes


def derive_graph(
    people: Iterable[Person],
    friendships: Iterable[Friendship],
    enmities: Iterable[Enmity],
    pairings: Iterable[Pairing],
    episode: int,
    *,
    strict_enemies: bool = False,
    palette: Sequence[str] = PALETTE,
) -> DerivedGraph:
    """
    Build the graph visible in `episode`.

    - Nodes: people who have arrived by `episode`, in input order.
    - Friend edges: friendships of exactly this episode whose two endpoints
      are both nodes. Anything else is dropped.
    - Enemy edges: every enmity whose endpoints exist in `people`, whatever
      the episode. With strict_enemies, both endpoints must also be nodes.

    Edge ids are numbered per kind ("fr0", "en0", ...) and restart on every
    call.
    """
    _check_episode(episode)
    people = list(people)

    colors = assign_colors(pairings, episode, palette)
    nodes = _build_nodes(people, episode, colors)

    known_ids = {p.id for p in people}
    visible_ids = {p.id for p in people if p.arrived is not None and p.arrived <= episode}

    edges: List[DerivedEdge] = []

    fr = 0
    for f in friendships:
        if f.episode != episode:
            continue
        if f.person_a not in visible_ids or f.person_b not in visible_ids:
            continue
        edges.append(
            DerivedEdge(
                id=f"fr{fr}",
                source=str(f.person_a),
                target=str(f.person_b),
                kind=EdgeKind.FRIEND,
                emoji=f.emoji,
                context=f.context,
                image_url=f.image_url,
            )
        )
        fr += 1

    enemy_ids = visible_ids if strict_enemies else known_ids
    en = 0
    for e in enmities:
        if e.person_a not in enemy_ids or e.person_b not in enemy_ids:
            continue
        edges.append(
            DerivedEdge(
                id=f"en{en}",
                source=str(e.person_a),
                target=str(e.person_b),
                kind=EdgeKind.ENEMY,
                emoji=e.emoji,
                context=e.context,
            )
        )
        en += 1

    graph = DerivedGraph(episode=episode, nodes=tuple(nodes), edges=tuple(edges))

    dangling = graph.dangling_edges()
    if dangling:
        logger.info(
            "Episode %d: %d enemy edge(s) point at people not yet arrived: %s",
            episode, len(dangling), ", ".join(e.id for e in dangling),
        )
    logger.debug("Derived episode %d: %d nodes, %d friend edges, %d enemy edges",
                 episode, len(nodes), fr, en)
    return graph


def to_elements(graph: DerivedGraph) -> list[dict]:
    """
    Cytoscape element list for a derived graph.

    Edges whose endpoints are not both nodes would make cytoscape throw, so
    they are left out here (the derived model keeps them).
    """
    ids = graph.node_ids()
    nodes = [{
        "data": {
            "id": n.id,
            "label": n.label,
            "pictureURL": n.picture_url,
            "bio": n.bio,
            "borderColor": n.border_color,
            "borderStyle": n.border_style,
            "deactivatedAt": n.deactivated,
        },
        "classes": "inactive" if n.is_inactive else "",
    } for n in graph.nodes]

    edges = []
    for e in graph.edges:
        if e.source not in ids or e.target not in ids:
            logger.warning("Dropping edge %s (%s -> %s): endpoint not in episode %d",
                           e.id, e.source, e.target, graph.episode)
            continue
        edges.append({
            "data": {
                "id": e.id,
                "source": e.source,
                "target": e.target,
                "type": e.kind.value,
                "emoji": e.emoji or "",
                "context": e.context or "",
                "imageURL": e.image_url,
            }
        })
    return nodes + edges
