from __future__ import annotations

import argparse
import logging
from typing import List

import kuzu
from plotly import graph_objects as go

from ..db import get_database
from ..graph import STRICT_ENEMIES, derive_graph
from ..models import DerivedGraph, EdgeKind
from ..store import EntityStore, load_store
from .layout import circle_layout

logger = logging.getLogger(__name__)

EDGE_COLORS = {EdgeKind.FRIEND: "green", EdgeKind.ENEMY: "red"}
NODE_COLOR = "#0074D9"
INACTIVE_COLOR = "#cccccc"


def _edge_traces(graph: DerivedGraph, pos) -> List[go.Scatter]:
    traces: List[go.Scatter] = []
    for kind, color in EDGE_COLORS.items():
        edge_x, edge_y = [], []
        mid_x, mid_y, emojis, edge_ids, hover = [], [], [], [], []
        for e in graph.edges:
            if e.kind != kind:
                continue
            if e.source not in pos or e.target not in pos:
                logger.warning("Skipping edge %s: endpoint not placed", e.id)
                continue
            x0, y0 = pos[e.source]
            x1, y1 = pos[e.target]
            edge_x += [x0, x1, None]
            edge_y += [y0, y1, None]
            mid_x.append((x0 + x1) / 2.0)
            mid_y.append((y0 + y1) / 2.0)
            emojis.append(e.emoji or "")
            edge_ids.append(e.id)
            hover.append(e.context or "")

        traces.append(go.Scatter(
            x=edge_x,
            y=edge_y,
            mode="lines",
            hoverinfo="none",
            line=dict(width=2, color=color),
            showlegend=False,
            name=f"{kind.value}-lines",
        ))
        # Emoji labels carry the edge ids so a click on them can select the edge
        traces.append(go.Scatter(
            x=mid_x,
            y=mid_y,
            mode="text",
            text=emojis,
            hovertext=hover,
            hoverinfo="text",
            textfont=dict(size=14, color=color),
            customdata=edge_ids,
            showlegend=False,
            name=f"{kind.value}-labels",
        ))
    return traces


def build_plotly_figure(graph: DerivedGraph) -> go.Figure:
    if not graph.nodes:
        fig = go.Figure()
        fig.update_layout(title=f"No one has arrived by episode {graph.episode}")
        return fig

    node_ids = [n.id for n in graph.nodes]
    pos = circle_layout(node_ids)

    node_trace = go.Scatter(
        x=[pos[n.id][0] for n in graph.nodes],
        y=[pos[n.id][1] for n in graph.nodes],
        mode="markers+text",
        text=[n.label for n in graph.nodes],
        textposition="top center",
        hovertext=[n.bio or n.label for n in graph.nodes],
        hoverinfo="text",
        marker=dict(
            size=30,
            color=[INACTIVE_COLOR if n.is_inactive else NODE_COLOR for n in graph.nodes],
            opacity=[0.5 if n.is_inactive else 1.0 for n in graph.nodes],
            line=dict(
                width=[2 if (n.border_color or n.is_inactive) else 0 for n in graph.nodes],
                color=["#000" if n.is_inactive else (n.border_color or NODE_COLOR)
                       for n in graph.nodes],
            ),
        ),
        customdata=node_ids,
        showlegend=False,
        name="people",
    )

    fig = go.Figure(data=[*_edge_traces(graph, pos), node_trace])
    fig.update_layout(
        showlegend=False,
        hovermode="closest",
        margin=dict(l=20, r=20, t=40, b=20),
        title=f"Episode {graph.episode}",
        plot_bgcolor="#1B1B24",
        paper_bgcolor="#1B1B24",
        font=dict(color="#e5e7eb"),
        xaxis=dict(showgrid=False, zeroline=False, showticklabels=False, range=[-1.3, 1.3]),
        yaxis=dict(showgrid=False, zeroline=False, showticklabels=False, range=[-1.3, 1.3],
                   scaleanchor="x", scaleratio=1),
    )
    return fig


def write_html(fig: go.Figure, out_path: str) -> None:
    config = {"scrollZoom": True, "displayModeBar": True, "responsive": True}
    fig.write_html(out_path, include_plotlyjs="cdn", full_html=True, config=config)


def render_episode(store: EntityStore, episode: int, out_path: str,
                   strict_enemies: bool = STRICT_ENEMIES) -> DerivedGraph:
    graph = derive_graph(store.people, store.friendships, store.enmities, store.pairings,
                         episode, strict_enemies=strict_enemies)
    write_html(build_plotly_figure(graph), out_path)
    return graph


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Render one episode of the cast graph to HTML")
    parser.add_argument("episode", type=int)
    parser.add_argument("-o", "--out", default=None, help="Output file (default episode-<n>.html)")
    parser.add_argument("--strict-enemies", action="store_true", default=STRICT_ENEMIES,
                        help="Only draw enemy edges between people who have arrived "
                             "(default from CASTMAP_STRICT_ENEMIES)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    store = load_store(kuzu.Connection(get_database()))
    out = args.out or f"episode-{args.episode}.html"
    graph = render_episode(store, args.episode, out, strict_enemies=args.strict_enemies)
    print(f"Wrote {out}: {len(graph.nodes)} people, {len(graph.edges)} edges")


if __name__ == "__main__":
    main()
