"""
models/album.py
---------------
Domain models for albums, their songs, and album likes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


@dataclass
class Song:
    """A song as listed inside an album (read-only here)."""
    id: str
    title: str
    performer: str

    def to_dict(self) -> dict:
        return {"id": self.id, "title": self.title, "performer": self.performer}


@dataclass
class Album:
    """
    Represents a single album.

    Attributes:
        id: Identifier of the form ``album-<16 chars>``.
        name: Album title.
        year: Release year.
        cover_url: Location of the uploaded cover image, if any.
        songs: Songs on the album (only populated by detail lookups).
    """
    id: str
    name: str
    year: int
    cover_url: Optional[str] = None
    songs: list[Song] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Render the album the way API responses expect it (camelCase cover)."""
        return {
            "id": self.id,
            "name": self.name,
            "year": self.year,
            "coverUrl": self.cover_url,
            "songs": [s.to_dict() for s in self.songs],
        }


class ToggleResult(str, Enum):
    """Which branch a like toggle took."""
    LIKED = "liked"
    UNLIKED = "unliked"


class LikeSource(str, Enum):
    """Where a like count was read from."""
    CACHE = "cache"
    STORE = "store"


@dataclass(frozen=True)
class LikeCount:
    """Number of users liking an album, and whether it came from the cache or the store."""
    count: int
    source: LikeSource

    def to_dict(self) -> dict:
        return {"likes": self.count, "source": self.source.value}
