"""
bootstrap.py
------------
Process startup and shutdown for the album data layer.

Responsibilities:
    - Initialize the database connection pool and the Redis client.
    - Build an AlbumRepository wired to both.
    - Release both on shutdown.
"""

from cache.redis_cache import RedisCache, close_client, init_client
from db.connection import close_pool, init_pool
from db.store import PostgresStore
from repositories.album_repo import AlbumRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def startup() -> AlbumRepository:
    """Open the shared connections and return a ready repository."""

    # ── 1. Database ───────────────────────────────────────
    logger.info("Initializing database...")
    conn_pool = init_pool()

    # ── 2. Cache ──────────────────────────────────────────
    logger.info("Initializing cache...")
    init_client()

    return AlbumRepository(PostgresStore(conn_pool), RedisCache())


def shutdown() -> None:
    """Close the shared connections opened by `startup()`."""
    close_client()
    close_pool()
    logger.info("Album data layer stopped.")
