from pydantic import BaseModel
from typing import Optional, Literal

from .models import EdgeKind


class PersonOut(BaseModel):
    id: int
    name: str
    picture_url: Optional[str] = None
    bio: Optional[str] = None
    arrived: Optional[int] = None
    deactivated: Optional[int] = None


class NodeOut(BaseModel):
    id: str
    label: str
    picture_url: Optional[str] = None
    bio: Optional[str] = None
    border_color: Optional[str] = None
    border_style: Optional[str] = None
    deactivated: Optional[int] = None
    is_inactive: bool = False


class EdgeOut(BaseModel):
    id: str
    source: str
    target: str
    kind: EdgeKind
    emoji: Optional[str] = None
    context: Optional[str] = None
    image_url: Optional[str] = None


class GraphOut(BaseModel):
    episode: int
    nodes: list[NodeOut]
    edges: list[EdgeOut]


class EpisodeIn(BaseModel):
    episode: int


class EpisodesOut(BaseModel):
    episodes: list[int]
    current: int


class SelectionOut(BaseModel):
    kind: Literal["none", "node", "edge"]
    node: Optional[NodeOut] = None
    edge: Optional[EdgeOut] = None
    detail: Optional[str] = None
    stale: bool = False
