"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh development database:
    python -m db.init_db
"""

from db.connection import get_pool
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Albums: one row per album, cover_url filled in after an upload
CREATE TABLE IF NOT EXISTS albums (
    id              VARCHAR(50) PRIMARY KEY,
    name            TEXT NOT NULL,
    year            INTEGER NOT NULL,
    cover_url       TEXT
);

-- Songs: read-only from the album repository's point of view
CREATE TABLE IF NOT EXISTS songs (
    id              VARCHAR(50) PRIMARY KEY,
    title           TEXT NOT NULL,
    performer       TEXT NOT NULL,
    album_id        VARCHAR(50) REFERENCES albums(id) ON DELETE CASCADE
);

-- Likes: existence of a row means the user likes the album
CREATE TABLE IF NOT EXISTS user_album_likes (
    id              SERIAL PRIMARY KEY,
    album_id        VARCHAR(50) NOT NULL REFERENCES albums(id) ON DELETE CASCADE,
    user_id         VARCHAR(50) NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_songs_album ON songs(album_id);
CREATE INDEX IF NOT EXISTS idx_likes_album_user ON user_album_likes(album_id, user_id);
"""


def create_tables(conn_pool=None) -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    conn_pool = conn_pool or get_pool()
    conn = conn_pool.getconn()
    try:
        with conn.cursor() as cur:
            cur.execute(SCHEMA_SQL)
        conn.commit()
        logger.info("Database schema initialized successfully.")
    except Exception as e:
        conn.rollback()
        logger.error(f"Failed to initialize schema: {e}")
        raise
    finally:
        conn_pool.putconn(conn)


if __name__ == "__main__":
    from db.connection import init_pool, close_pool
    init_pool()
    try:
        create_tables()
    finally:
        close_pool()
    print("Database schema created successfully.")
