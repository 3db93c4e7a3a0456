"""Shared fixtures for castmap test suite."""
import pytest
import kuzu
from fastapi.testclient import TestClient

from castmap.db import _init_schema
from castmap.episodes import EpisodeSelector
from castmap.models import Enmity, Friendship, Pairing, Person
from castmap.store import EntityStore
from castmap.view import GraphView


# ── CSV constants for import tests ──

PEOPLE_CSV = """\
id,name,pictureURL,bio,arrived,deactivated
1,Ada,https://img/ada.png,Likes boats,1,
2,Ben,,,1,3
3,Cleo,,Late arrival,2,
4,Dan,,,,
"""

FRIENDS_CSV = """\
friend_1,friend_2,emoji,context,episode,imageURL
1,2,🤝,Shared a cabin,1,
1,3,💬,,2,https://img/chat.png
"""

ENEMIES_CSV = """\
enemy_1,enemy_2,emoji,context
2,3,👿,Argument at dinner
"""

PAIRS_CSV = """\
pair_1,pair_2,episode
1,2,1
1,3,2
"""


# ── In-memory entities ──

@pytest.fixture
def people():
    return [
        Person(1, "Ada", picture_url="https://img/ada.png", bio="Likes boats", arrived=1),
        Person(2, "Ben", arrived=1, deactivated=3),
        Person(3, "Cleo", bio="Late arrival", arrived=2),
        Person(4, "Dan"),  # never arrives
    ]


@pytest.fixture
def friendships():
    return [
        Friendship(1, 2, episode=1, emoji="🤝", context="Shared a cabin"),
        Friendship(1, 3, episode=2, emoji="💬", image_url="https://img/chat.png"),
        Friendship(2, 3, episode=1, emoji="🙂"),  # Cleo not there yet in ep 1
        Friendship(1, 99, episode=1, emoji="?"),  # unknown person
    ]


@pytest.fixture
def enmities():
    return [
        Enmity(2, 3, emoji="👿", context="Argument at dinner"),
        Enmity(1, 4, emoji="😠", context="Never met"),
        Enmity(1, 99, emoji="💥", context="Ghost"),
    ]


@pytest.fixture
def pairings():
    return [Pairing(1, 2, episode=1), Pairing(1, 3, episode=2)]


@pytest.fixture
def store(people, friendships, enmities, pairings):
    return EntityStore(tuple(people), tuple(friendships), tuple(enmities), tuple(pairings))


@pytest.fixture
def view(store):
    return GraphView(store, EpisodeSelector(1, last=17))


# ── Database fixtures ──

@pytest.fixture
def db_path(tmp_path):
    """Temp location for a fresh KuzuDB."""
    return tmp_path / "test_db"


@pytest.fixture
def db(db_path):
    """Initialized KuzuDB with the cast schema."""
    database = kuzu.Database(str(db_path))
    _init_schema(database)
    return database


@pytest.fixture
def conn(db):
    return kuzu.Connection(db)


# ── FastAPI app fixtures ──

@pytest.fixture
def app_with_view(view):
    """FastAPI app with get_view overridden to the in-memory view."""
    from castmap.main import app, get_view

    app.dependency_overrides[get_view] = lambda: view
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app_with_view):
    return TestClient(app_with_view, raise_server_exceptions=False)
