"""
Shared fixtures: an SQLite-backed store speaking the same execute()
contract as PostgresStore, and an in-memory cache speaking RedisCache's.
"""

import sqlite3

import pytest

from cache.redis_cache import CacheLookup
from db.store import QueryResult
from repositories.album_repo import AlbumRepository

SQLITE_SCHEMA = """
CREATE TABLE albums (
    id        TEXT PRIMARY KEY,
    name      TEXT NOT NULL,
    year      INTEGER NOT NULL,
    cover_url TEXT
);
CREATE TABLE songs (
    id        TEXT PRIMARY KEY,
    title     TEXT NOT NULL,
    performer TEXT NOT NULL,
    album_id  TEXT
);
CREATE TABLE user_album_likes (
    id        INTEGER PRIMARY KEY AUTOINCREMENT,
    album_id  TEXT NOT NULL,
    user_id   TEXT NOT NULL
);
"""


class SqliteStore:
    """Runs psycopg2-style (`%s`) SQL against an in-memory SQLite database."""

    def __init__(self):
        self.conn = sqlite3.connect(":memory:", isolation_level=None)
        self.conn.executescript(SQLITE_SCHEMA)
        self.statements: list[str] = []

    def execute(self, sql, params=()):
        self.statements.append(sql)
        cur = self.conn.execute(sql.replace("%s", "?"), tuple(params))
        if cur.description is not None:
            rows = cur.fetchall()
            return QueryResult(rows=rows, row_count=len(rows))
        return QueryResult(rows=[], row_count=cur.rowcount)

    def count_likes(self, album_id):
        cur = self.conn.execute(
            "SELECT COUNT(*) FROM user_album_likes WHERE album_id = ?", (album_id,)
        )
        return cur.fetchone()[0]


class FakeCache:
    """Dict-backed cache; values are stored as strings like Redis does."""

    def __init__(self):
        self.data: dict[str, str] = {}
        self.calls: list[tuple] = []

    def get(self, key):
        self.calls.append(("get", key))
        if key in self.data:
            return CacheLookup(hit=True, value=self.data[key])
        return CacheLookup.miss()

    def set(self, key, value, ttl=None):
        self.calls.append(("set", key, value, ttl))
        self.data[key] = str(value)

    def delete(self, key):
        self.calls.append(("delete", key))
        self.data.pop(key, None)

    def mutations(self):
        return [c for c in self.calls if c[0] != "get"]


@pytest.fixture
def store() -> SqliteStore:
    return SqliteStore()


@pytest.fixture
def cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def repo(store, cache) -> AlbumRepository:
    return AlbumRepository(store, cache, likes_ttl=1800)
