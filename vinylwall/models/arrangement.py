"""Arrangement state: display/pool partition, pins, grid dimensions, sort option."""
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, Tuple

from vinylwall.models.album import Album, AlbumId


class SortOption(str, Enum):
    NONE = "none"
    ARTIST = "artist"
    GENRE = "genre"


@dataclass(frozen=True)
class Dimensions:
    """Wall grid size. Capacity is rows x columns."""
    rows: int
    columns: int

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    @property
    def is_valid(self) -> bool:
        return self.rows >= 1 and self.columns >= 1


@dataclass(frozen=True)
class Arrangement:
    """Immutable (display, pool, pinned) triple.

    Operations never mutate an Arrangement; they return a new one.
    """
    display: Tuple[Album, ...] = ()
    pool: Tuple[Album, ...] = ()
    pinned: FrozenSet[AlbumId] = field(default_factory=frozenset)

    @classmethod
    def from_collection(cls, albums: Iterable[Album], capacity: int) -> "Arrangement":
        """Slice a flat collection by capacity; nothing pinned."""
        items = tuple(albums)
        return cls(display=items[:capacity], pool=items[capacity:], pinned=frozenset())

    @property
    def albums(self) -> Tuple[Album, ...]:
        """Display followed by pool (render order)."""
        return self.display + self.pool

    def display_ids(self) -> Tuple[AlbumId, ...]:
        return tuple(a.id for a in self.display)

    def pool_ids(self) -> Tuple[AlbumId, ...]:
        return tuple(a.id for a in self.pool)

    def index_in_display(self, album_id: AlbumId) -> int:
        """Index of album_id in display, or -1."""
        for i, album in enumerate(self.display):
            if album.id == album_id:
                return i
        return -1

    def index_in_pool(self, album_id: AlbumId) -> int:
        """Index of album_id in pool, or -1."""
        for i, album in enumerate(self.pool):
            if album.id == album_id:
                return i
        return -1
