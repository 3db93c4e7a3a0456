"""Detail text shown for the selected node or edge."""
from __future__ import annotations

from .models import DerivedEdge, DerivedNode
from .selection import EdgeSelection, NodeSelection, Selection

NO_BIO = "No bio available"
NO_CONTEXT = "No context"


def node_detail(node: DerivedNode, episode: int) -> str:
    if node.deactivated is not None and node.deactivated <= episode:
        return f"{node.label} was eliminated in episode {node.deactivated}"
    return node.bio or NO_BIO


def edge_detail(edge: DerivedEdge) -> str:
    return edge.context or NO_CONTEXT


def describe_selection(selection: Selection, episode: int) -> dict:
    if isinstance(selection, NodeSelection):
        return {"kind": "node", "node": selection.node, "edge": None,
                "detail": node_detail(selection.node, episode)}
    if isinstance(selection, EdgeSelection):
        return {"kind": "edge", "node": None, "edge": selection.edge,
                "detail": edge_detail(selection.edge)}
    return {"kind": "none", "node": None, "edge": None, "detail": None}
