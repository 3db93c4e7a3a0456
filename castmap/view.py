"""One interactive view: store + episode selector + derived graph + selection."""
from __future__ import annotations

import logging
from typing import Optional

from .episodes import EpisodeSelector
from .graph import derive_graph
from .models import DerivedGraph
from .selection import EdgeSelection, NodeSelection, SelectionState
from .store import EntityStore

logger = logging.getLogger(__name__)


class GraphView:
    """
    Keeps `graph` in step with the store and the selected episode.

    Any change rebuilds the whole graph. The selection is left alone when
    that happens; use selection_is_stale() to find out whether the selected
    record still exists in the new graph.
    """

    def __init__(self, store: EntityStore, selector: Optional[EpisodeSelector] = None,
                 selection: Optional[SelectionState] = None, *, strict_enemies: bool = False):
        self.store = store
        self.selector = selector or EpisodeSelector()
        self.selection = selection or SelectionState()
        self.strict_enemies = strict_enemies
        self.graph: DerivedGraph = self._derive()
        self.selector.subscribe(self._on_episode)

    @property
    def episode(self) -> int:
        return self.selector.current

    def _derive(self) -> DerivedGraph:
        s = self.store
        return derive_graph(s.people, s.friendships, s.enmities, s.pairings,
                            self.selector.current, strict_enemies=self.strict_enemies)

    def _on_episode(self, _episode: int) -> None:
        self.graph = self._derive()

    def select_episode(self, episode: int) -> DerivedGraph:
        self.selector.select(episode)
        return self.graph

    def reload(self, store: EntityStore) -> DerivedGraph:
        self.store = store
        self.graph = self._derive()
        logger.info("Store reloaded; episode %d has %d nodes, %d edges",
                    self.episode, len(self.graph.nodes), len(self.graph.edges))
        return self.graph

    # ── Tap events from the render boundary ──

    def tap_node(self, node_id: str):
        node = self.graph.node(node_id)
        if node is None:
            raise KeyError(node_id)
        self.selection.select_node(node)
        return node

    def tap_edge(self, edge_id: str):
        edge = self.graph.edge(edge_id)
        if edge is None:
            raise KeyError(edge_id)
        self.selection.select_edge(edge)
        return edge

    def dismiss(self) -> None:
        self.selection.dismiss()

    def close(self) -> None:
        """Stop following the episode selector."""
        self.selector.unsubscribe(self._on_episode)

    def selection_is_stale(self) -> bool:
        """True when the selected node or edge is gone from the current graph.

        Node ids are stable across recomputation, so a node is stale only when
        its id is no longer in the graph. Edge ids are renumbered on every
        derivation, so an edge is stale unless an identical record is present.
        """
        current = self.selection.current
        if isinstance(current, NodeSelection):
            return self.graph.node(current.node.id) is None
        if isinstance(current, EdgeSelection):
            return current.edge not in self.graph.edges
        return False
