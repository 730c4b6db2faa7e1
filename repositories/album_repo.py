"""
repositories/album_repo.py
--------------------------
Data access layer for albums and album likes.
All SQL queries touching `albums`, `songs` and `user_album_likes` live here,
along with the cached like counts derived from `user_album_likes`.
"""

import secrets

from config import LIKE_COUNT_CACHE_TTL_SECONDS
from exceptions import ConflictError, InvariantError, NotFoundError
from models.album import Album, LikeCount, LikeSource, Song, ToggleResult
from utils.logger import get_logger

logger = get_logger(__name__)

LIKES_CACHE_PREFIX = "user_album_likes:"


def new_album_id() -> str:
    """Return a fresh ``album-<16 url-safe chars>`` identifier."""
    return f"album-{secrets.token_urlsafe(12)}"


def likes_cache_key(album_id: str) -> str:
    return f"{LIKES_CACHE_PREFIX}{album_id}"


class AlbumRepository:
    """
    Repository for album CRUD and the per-user like relation.

    Args:
        store: Anything with ``execute(sql, params) -> QueryResult``.
        cache: Anything with ``get(key) -> CacheLookup``, ``set(key, value, ttl)``
            and ``delete(key)``.
        likes_ttl: Expiry (seconds) for cached like counts.
    """

    def __init__(self, store, cache, likes_ttl: int | None = LIKE_COUNT_CACHE_TTL_SECONDS):
        self.store = store
        self.cache = cache
        self.likes_ttl = likes_ttl

    # ── CREATE ────────────────────────────────────────────

    def add_album(self, name: str, year: int) -> str:
        """
        Insert a new album.

        Returns:
            The generated album id.

        Raises:
            InvariantError: If the insert did not hand back an id.
        """
        album_id = new_album_id()
        sql = "INSERT INTO albums (id, name, year) VALUES (%s, %s, %s) RETURNING id;"
        row = self.store.execute(sql, (album_id, name, year)).first()
        if not row or not row[0]:
            raise InvariantError("Failed to add album")
        logger.info(f"Added album {row[0]} ({name!r}, {year})")
        return row[0]

    # ── READ ──────────────────────────────────────────────

    def list_albums(self) -> list[dict]:
        """Return every album as ``{'id', 'name', 'year'}``, in storage order."""
        result = self.store.execute("SELECT id, name, year FROM albums;", ())
        return [{"id": r[0], "name": r[1], "year": r[2]} for r in result.rows]

    def get_album_by_id(self, album_id: str) -> Album:
        """
        Fetch an album together with its songs.

        The album row and its songs are read in two separate statements.

        Raises:
            NotFoundError: If no album has this id.
        """
        sql = "SELECT id, name, year, cover_url FROM albums WHERE id = %s;"
        row = self.store.execute(sql, (album_id,)).first()
        if row is None:
            raise NotFoundError("Album not found")

        songs_sql = "SELECT id, title, performer FROM songs WHERE album_id = %s;"
        songs = self.store.execute(songs_sql, (album_id,)).rows
        return Album(
            id=row[0],
            name=row[1],
            year=row[2],
            cover_url=row[3],
            songs=[Song(id=s[0], title=s[1], performer=s[2]) for s in songs],
        )

    def assert_album_exists(self, album_id: str) -> None:
        """Raise NotFoundError unless an album with this id exists."""
        result = self.store.execute("SELECT id FROM albums WHERE id = %s;", (album_id,))
        if not result.rows:
            raise NotFoundError("Album not found")

    # ── UPDATE ────────────────────────────────────────────

    def edit_album_by_id(self, album_id: str, name: str, year: int) -> None:
        """
        Update an album's name and year.

        Raises:
            NotFoundError: If no album has this id.
        """
        sql = "UPDATE albums SET name = %s, year = %s WHERE id = %s;"
        result = self.store.execute(sql, (name, year, album_id))
        if result.row_count < 1:
            raise NotFoundError("Failed to update album. Id not found")
        logger.info(f"Updated album {album_id}")

    def edit_album_cover_by_id(self, album_id: str, cover_url: str) -> None:
        """Set the cover URL. Unknown ids are a silent no-op."""
        sql = "UPDATE albums SET cover_url = %s WHERE id = %s;"
        result = self.store.execute(sql, (cover_url, album_id))
        if result.row_count:
            logger.info(f"Updated cover of album {album_id}")

    # ── DELETE ────────────────────────────────────────────

    def delete_album_by_id(self, album_id: str) -> None:
        """
        Delete an album.

        Raises:
            NotFoundError: If no album has this id.
        """
        result = self.store.execute("DELETE FROM albums WHERE id = %s;", (album_id,))
        if result.row_count < 1:
            raise NotFoundError("Failed to delete album. Id not found")
        logger.info(f"Deleted album {album_id}")

    # ── LIKES ─────────────────────────────────────────────

    def toggle_like(self, album_id: str, user_id: str) -> ToggleResult:
        """
        Like the album if the user has not liked it yet, otherwise unlike it.

        The cached like count is dropped after either branch. Existence is
        checked before the write without locking, so two concurrent toggles
        by the same user may both take the same branch.

        Raises:
            NotFoundError: If the album does not exist (cache untouched).
            ConflictError: If the insert/delete affected no rows.
        """
        self.assert_album_exists(album_id)

        select_sql = "SELECT id FROM user_album_likes WHERE album_id = %s AND user_id = %s;"
        existing = self.store.execute(select_sql, (album_id, user_id))

        if not existing.rows:
            insert_sql = "INSERT INTO user_album_likes (album_id, user_id) VALUES (%s, %s);"
            if self.store.execute(insert_sql, (album_id, user_id)).row_count < 1:
                raise ConflictError("Failed to like album")
            outcome = ToggleResult.LIKED
        else:
            delete_sql = "DELETE FROM user_album_likes WHERE album_id = %s AND user_id = %s;"
            if self.store.execute(delete_sql, (album_id, user_id)).row_count < 1:
                raise ConflictError("Failed to unlike album")
            outcome = ToggleResult.UNLIKED

        self.cache.delete(likes_cache_key(album_id))
        logger.info(f"User {user_id} {outcome.value} album {album_id}")
        return outcome

    def get_like_count(self, album_id: str) -> LikeCount:
        """
        Number of users who like the album, cache first.

        A cache hit is returned as-is, without checking that the album still
        exists. On a miss the count is taken from the store and written back.

        Raises:
            NotFoundError: On a cache miss for an album that does not exist.
        """
        key = likes_cache_key(album_id)
        lookup = self.cache.get(key)
        if lookup.hit:
            try:
                return LikeCount(count=int(lookup.value), source=LikeSource.CACHE)
            except (TypeError, ValueError):
                logger.warning(f"Ignoring unreadable cached value for {key}: {lookup.value!r}")

        self.assert_album_exists(album_id)
        sql = "SELECT COUNT(*) FROM user_album_likes WHERE album_id = %s;"
        count = int(self.store.execute(sql, (album_id,)).first()[0])
        self.cache.set(key, count, self.likes_ttl)
        return LikeCount(count=count, source=LikeSource.STORE)
