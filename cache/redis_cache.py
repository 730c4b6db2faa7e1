"""
cache/redis_cache.py
--------------------
Key-value cache backed by Redis.
Holds the process-wide Redis client (`init_client()` / `close_client()`)
and the `RedisCache` wrapper the repositories talk to.
"""

from dataclasses import dataclass
from typing import Any, Optional

import redis

from config import REDIS_URL
from utils.logger import get_logger

logger = get_logger(__name__)

_client: redis.Redis | None = None


def init_client(url: str = REDIS_URL) -> redis.Redis:
    """
    Create the shared Redis client (idempotent).

    Args:
        url: Redis connection URL, e.g. ``redis://localhost:6379/0``.

    Returns:
        The shared client.
    """
    global _client
    if _client is not None:
        return _client
    _client = redis.Redis.from_url(url, decode_responses=True)
    logger.info("Redis client initialized.")
    return _client


def get_client() -> redis.Redis:
    """
    Return the shared client.

    Raises:
        RuntimeError: If the client has not been initialized.
    """
    if _client is None:
        raise RuntimeError("Redis client not initialized. Call init_client() first.")
    return _client


def close_client() -> None:
    """Close the shared client's connections."""
    global _client
    if _client is not None:
        _client.close()
        _client = None
        logger.info("Redis client closed.")


@dataclass(frozen=True)
class CacheLookup:
    """Result of a cache read: `hit` tells whether `value` is meaningful."""
    hit: bool
    value: Optional[str] = None

    @classmethod
    def miss(cls) -> "CacheLookup":
        return cls(hit=False)


class RedisCache:
    """get / set / delete over a Redis client."""

    def __init__(self, client: redis.Redis | None = None):
        self.client = client if client is not None else get_client()

    def get(self, key: str) -> CacheLookup:
        """
        Read a key.

        A missing key, any Redis failure and a value that does not decode
        all come back as a miss, so readers can always fall back to the
        authoritative store.
        """
        try:
            value = self.client.get(key)
        except (redis.RedisError, UnicodeDecodeError) as e:
            logger.warning(f"Cache GET failed for {key}, treating as miss: {e}")
            return CacheLookup.miss()
        if value is None:
            logger.debug(f"Cache MISS: {key}")
            return CacheLookup.miss()
        logger.debug(f"Cache HIT: {key}")
        return CacheLookup(hit=True, value=value)

    def set(self, key: str, value: Any, ttl: Optional[int] = None) -> None:
        """Store a value, expiring after `ttl` seconds when given."""
        self.client.set(key, value, ex=ttl)
        logger.debug(f"Cache SET: {key} (ttl: {ttl})")

    def delete(self, key: str) -> None:
        """Remove a key; removing an absent key is not an error."""
        deleted = self.client.delete(key)
        logger.debug(f"Cache DELETE: {key} (deleted: {deleted})")
