import os
import logging
import kuzu
import uvicorn
from fastapi import FastAPI, Depends, HTTPException, Query

from .db import get_database
from .episodes import EpisodeSelector
from .graph import STRICT_ENEMIES, derive_graph, to_elements
from .inspector import describe_selection
from .store import load_store
from .view import GraphView
from . import schemas

logger = logging.getLogger(__name__)

EPISODE_COUNT = int(os.environ.get("CASTMAP_EPISODE_COUNT", "17"))

_view = None


def get_view() -> GraphView:
    """The process-wide view, built from the database on first use."""
    global _view
    if _view is None:
        store = load_store(kuzu.Connection(get_database()))
        _view = GraphView(store, EpisodeSelector(1, last=EPISODE_COUNT),
                          strict_enemies=STRICT_ENEMIES)
    return _view


app = FastAPI(title="castmap")


def _selection_out(view: GraphView) -> dict:
    out = describe_selection(view.selection.current, view.episode)
    out["stale"] = view.selection_is_stale()
    return out


@app.get("/health")
def health():
    return {"ok": True}


@app.get("/api/people", response_model=list[schemas.PersonOut])
def people(view: GraphView = Depends(get_view)):
    return list(view.store.people)


@app.get("/api/episodes", response_model=schemas.EpisodesOut)
def episodes(view: GraphView = Depends(get_view)):
    return {"episodes": view.selector.episodes(), "current": view.episode}


@app.put("/api/episode", response_model=schemas.GraphOut)
def select_episode(body: schemas.EpisodeIn, view: GraphView = Depends(get_view)):
    try:
        return view.select_episode(body.episode)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))


@app.get("/api/graph", response_model=schemas.GraphOut)
def get_graph(episode: int | None = Query(None), view: GraphView = Depends(get_view)):
    if episode is None:
        return view.graph
    s = view.store
    return derive_graph(s.people, s.friendships, s.enmities, s.pairings, episode,
                        strict_enemies=view.strict_enemies)


@app.get("/api/elements")
def get_elements(episode: int | None = Query(None), view: GraphView = Depends(get_view)):
    return to_elements(get_graph(episode, view))


@app.get("/api/selection", response_model=schemas.SelectionOut)
def get_selection(view: GraphView = Depends(get_view)):
    return _selection_out(view)


@app.post("/api/selection/node/{node_id}", response_model=schemas.SelectionOut)
def tap_node(node_id: str, view: GraphView = Depends(get_view)):
    try:
        view.tap_node(node_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Node {node_id} not in episode {view.episode}")
    return _selection_out(view)


@app.post("/api/selection/edge/{edge_id}", response_model=schemas.SelectionOut)
def tap_edge(edge_id: str, view: GraphView = Depends(get_view)):
    try:
        view.tap_edge(edge_id)
    except KeyError:
        raise HTTPException(status_code=404, detail=f"Edge {edge_id} not in episode {view.episode}")
    return _selection_out(view)


@app.delete("/api/selection", response_model=schemas.SelectionOut)
def dismiss(view: GraphView = Depends(get_view)):
    view.dismiss()
    return _selection_out(view)


def run() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    uvicorn.run(app, host=os.environ.get("HOST", "127.0.0.1"), port=int(os.environ.get("PORT", "8000")))


if __name__ == "__main__":
    run()
