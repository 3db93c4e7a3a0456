"""Tests for castmap/view.py and castmap/inspector.py."""
import pytest

from castmap.episodes import EpisodeSelector
from castmap.inspector import NO_BIO, NO_CONTEXT, describe_selection, edge_detail, node_detail
from castmap.models import Pairing, Person
from castmap.store import EntityStore
from castmap.view import GraphView


class TestGraphView:
    def test_initial_graph(self, view):
        assert view.episode == 1
        assert view.graph.episode == 1
        assert view.graph.node_ids() == {"1", "2"}

    def test_recompute_on_episode_change(self, view):
        first = view.graph
        view.select_episode(2)
        assert view.graph is not first
        assert view.graph.episode == 2
        assert view.graph.node_ids() == {"1", "2", "3"}

    def test_selector_drives_view(self, store):
        selector = EpisodeSelector()
        v = GraphView(store, selector)
        selector.select(2)
        assert v.graph.episode == 2

    def test_reload(self, view):
        view.reload(EntityStore(people=(Person(7, "Gus", arrived=1),)))
        assert view.graph.node_ids() == {"7"}
        assert view.graph.edges == ()

    def test_empty_store(self):
        v = GraphView(EntityStore.empty())
        assert v.graph.nodes == () and v.graph.edges == ()

    def test_tap_node_and_edge(self, view):
        view.tap_node("1")
        assert view.selection.selected_node.label == "Ada"
        view.tap_edge("fr0")
        assert view.selection.selected_node is None
        assert view.selection.selected_edge.emoji == "🤝"
        view.dismiss()
        assert view.selection.current is None

    def test_tap_unknown(self, view):
        with pytest.raises(KeyError):
            view.tap_node("3")  # not arrived yet
        with pytest.raises(KeyError):
            view.tap_edge("fr9")

    def test_selection_survives_episode_change(self, view):
        view.tap_edge("fr0")
        view.select_episode(2)
        assert view.selection.selected_edge is not None
        # fr0 in episode 2 is a different friendship
        assert view.selection_is_stale() is True

    def test_node_not_stale_when_record_changes(self):
        store = EntityStore(
            people=(Person(1, "A", arrived=1), Person(2, "B", arrived=1)),
            pairings=(Pairing(1, 2, episode=1),),
        )
        v = GraphView(store)
        v.tap_node("1")
        v.select_episode(2)
        # Border color is gone but the person is still in the graph
        assert v.graph.node("1").border_color is None
        assert v.selection_is_stale() is False

    def test_node_stale_when_removed(self, view):
        view.select_episode(2)
        view.tap_node("3")
        assert view.selection_is_stale() is False
        view.select_episode(1)
        # Cleo has not arrived in episode 1
        assert view.selection_is_stale() is True
        view.dismiss()
        assert view.selection_is_stale() is False

    def test_close_stops_recomputing(self, store):
        selector = EpisodeSelector()
        v = GraphView(store, selector)
        v.close()
        selector.select(2)
        assert v.graph.episode == 1

    def test_strict_enemies(self, store):
        v = GraphView(store, strict_enemies=True)
        assert v.graph.dangling_edges() == []


class TestInspector:
    def test_node_bio(self, view):
        node = view.graph.node("1")
        assert node_detail(node, 1) == "Likes boats"

    def test_node_no_bio(self, view):
        node = view.graph.node("2")
        assert node_detail(node, 1) == NO_BIO

    def test_node_eliminated(self, view):
        view.select_episode(3)
        node = view.graph.node("2")
        assert node_detail(node, 3) == "Ben was eliminated in episode 3"

    def test_edge(self, view):
        assert edge_detail(view.graph.edge("fr0")) == "Shared a cabin"
        view.select_episode(2)
        assert edge_detail(view.graph.edge("fr0")) == NO_CONTEXT

    def test_describe(self, view):
        assert describe_selection(None, 1)["kind"] == "none"
        view.tap_node("1")
        out = describe_selection(view.selection.current, 1)
        assert out["kind"] == "node"
        assert out["node"].id == "1"
        assert out["edge"] is None
        view.tap_edge("en0")
        out = describe_selection(view.selection.current, 1)
        assert out["kind"] == "edge"
        assert out["detail"] == "Argument at dinner"
