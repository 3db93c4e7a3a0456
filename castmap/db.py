"""KuzuDB embedded graph database connection."""
import os
import logging
import kuzu
from pathlib import Path

logger = logging.getLogger(__name__)

DB_PATH = Path(os.environ.get("DB_PATH", Path(__file__).resolve().parent.parent / "graph_data"))
_database = None


def get_database():
    global _database
    if _database is None:
        DB_PATH.parent.mkdir(parents=True, exist_ok=True)
        _database = kuzu.Database(str(DB_PATH))
        _init_schema(_database)
        logger.info("Opened cast database at %s", DB_PATH)
    return _database


def _init_schema(db):
    conn = kuzu.Connection(db)

    # ── People ──
    conn.execute(
        "CREATE NODE TABLE IF NOT EXISTS Person("
        "id INT64, name STRING, picture_url STRING, bio STRING, "
        "arrived INT64, deactivated INT64, "
        "PRIMARY KEY(id))"
    )

    # ── Relations (seq keeps insertion order; pair direction carries no meaning) ──
    conn.execute(
        "CREATE REL TABLE IF NOT EXISTS FRIEND_OF(FROM Person TO Person, "
        "seq INT64, episode INT64, emoji STRING, context STRING, image_url STRING)"
    )
    conn.execute(
        "CREATE REL TABLE IF NOT EXISTS ENEMY_OF(FROM Person TO Person, "
        "seq INT64, emoji STRING, context STRING)"
    )
    conn.execute(
        "CREATE REL TABLE IF NOT EXISTS PAIRED_WITH(FROM Person TO Person, "
        "seq INT64, episode INT64)"
    )

