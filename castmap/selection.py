"""Which single node or edge is currently being inspected."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from .models import DerivedEdge, DerivedNode


@dataclass(frozen=True)
class NodeSelection:
    node: DerivedNode


@dataclass(frozen=True)
class EdgeSelection:
    edge: DerivedEdge


Selection = Optional[Union[NodeSelection, EdgeSelection]]


class SelectionState:
    """
    Holds at most one selection. Each transition replaces the whole value,
    so a node and an edge can never be selected together.
    """

    def __init__(self):
        self._current: Selection = None

    @property
    def current(self) -> Selection:
        return self._current

    @property
    def selected_node(self) -> Optional[DerivedNode]:
        if isinstance(self._current, NodeSelection):
            return self._current.node
        return None

    @property
    def selected_edge(self) -> Optional[DerivedEdge]:
        if isinstance(self._current, EdgeSelection):
            return self._current.edge
        return None

    def select_node(self, node: DerivedNode) -> None:
        self._current = NodeSelection(node)

    def select_edge(self, edge: DerivedEdge) -> None:
        self._current = EdgeSelection(edge)

    def dismiss(self) -> None:
        self._current = None
