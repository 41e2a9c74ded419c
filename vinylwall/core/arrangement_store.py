"""Holds the current wall arrangement and applies every operation atomically."""
import logging
import random
import threading
from typing import Iterable, Optional, Tuple

from vinylwall.config import DEFAULT_COLUMNS, DEFAULT_ROWS
from vinylwall.core import pinning
from vinylwall.core.capacity import redistribute
from vinylwall.core.drag import reconcile_drag
from vinylwall.core.shuffle import shuffle_arrangement
from vinylwall.core.sorting import sort_arrangement
from vinylwall.models.album import Album, AlbumId
from vinylwall.models.arrangement import Arrangement, Dimensions, SortOption

logger = logging.getLogger(__name__)


class ArrangementStore:
    """Owns (display, pool, pinned), the grid dimensions and the sort option.

    Each mutating call computes the next Arrangement in full and then swaps it in
    under a lock, so readers only ever see complete states. Calls are applied in
    the order they arrive.
    """

    def __init__(
        self,
        rows: int = DEFAULT_ROWS,
        columns: int = DEFAULT_COLUMNS,
        rng: Optional[random.Random] = None,
    ) -> None:
        dimensions = Dimensions(rows, columns)
        if not dimensions.is_valid:
            raise ValueError(f"rows and columns must be >= 1, got {rows}x{columns}")
        self._dimensions = dimensions
        self._default_dimensions = dimensions
        self._sort_option = SortOption.NONE
        self._arrangement = Arrangement()
        self._rng = rng or random.Random()
        self._lock = threading.Lock()

    # Reads

    @property
    def arrangement(self) -> Arrangement:
        with self._lock:
            return self._arrangement

    @property
    def dimensions(self) -> Dimensions:
        with self._lock:
            return self._dimensions

    @property
    def capacity(self) -> int:
        return self.dimensions.capacity

    @property
    def sort_option(self) -> SortOption:
        with self._lock:
            return self._sort_option

    @property
    def display(self) -> Tuple[Album, ...]:
        """Display albums in render order."""
        return self.arrangement.display

    @property
    def pool(self) -> Tuple[Album, ...]:
        return self.arrangement.pool

    def is_pinned(self, album_id: AlbumId) -> bool:
        return album_id in self.arrangement.pinned

    def are_all_pinned(self) -> bool:
        arrangement = self.arrangement
        return pinning.are_all_pinned(arrangement.pinned, arrangement.display)

    def find_album_id(self, raw_id: str) -> Optional[AlbumId]:
        """Resolve an id as received over the wire (always a string) to the album's id."""
        for album in self.arrangement.albums:
            if str(album.id) == str(raw_id):
                return album.id
        return None

    # Writes

    def load(self, albums: Iterable[Album]) -> Arrangement:
        """Replace the collection; pins and sort option start fresh."""
        with self._lock:
            self._arrangement = Arrangement.from_collection(albums, self._dimensions.capacity)
            self._sort_option = SortOption.NONE
            logger.info(
                "Loaded %d album(s): %d on display, %d in pool",
                len(self._arrangement.albums),
                len(self._arrangement.display),
                len(self._arrangement.pool),
            )
            return self._arrangement

    def set_dimensions(self, rows: int, columns: int) -> Arrangement:
        """Resize the grid. Rows or columns below 1 are ignored."""
        new_dimensions = Dimensions(rows, columns)
        with self._lock:
            if not new_dimensions.is_valid:
                logger.debug("Ignoring invalid dimensions %dx%d", rows, columns)
                return self._arrangement
            old_capacity = self._dimensions.capacity
            self._arrangement = redistribute(
                self._arrangement, old_capacity, new_dimensions.capacity
            )
            self._dimensions = new_dimensions
            logger.info(
                "Grid resized to %dx%d (capacity %d -> %d)",
                rows,
                columns,
                old_capacity,
                new_dimensions.capacity,
            )
            return self._arrangement

    def reset_dimensions(self) -> Arrangement:
        default = self._default_dimensions
        return self.set_dimensions(default.rows, default.columns)

    def toggle_pin(self, album_id: AlbumId) -> Arrangement:
        with self._lock:
            current = self._arrangement
            pinned = pinning.toggle_pin(current.pinned, current.display, album_id)
            self._arrangement = Arrangement(current.display, current.pool, pinned)
            return self._arrangement

    def toggle_pin_all(self) -> Arrangement:
        with self._lock:
            current = self._arrangement
            pinned = pinning.toggle_pin_all(current.pinned, current.display)
            self._arrangement = Arrangement(current.display, current.pool, pinned)
            return self._arrangement

    def set_sort(self, option: SortOption) -> Arrangement:
        """Record the sort option and reorder display and pool by it."""
        option = SortOption(option)
        with self._lock:
            self._sort_option = option
            current = self._arrangement
            display, pool = sort_arrangement(current.display, current.pool, option, current.pinned)
            self._arrangement = Arrangement(tuple(display), tuple(pool), current.pinned)
            return self._arrangement

    def shuffle(self) -> Arrangement:
        with self._lock:
            current = self._arrangement
            display, pool = shuffle_arrangement(
                current.display, current.pool, current.pinned, self._rng
            )
            self._arrangement = Arrangement(tuple(display), tuple(pool), current.pinned)
            return self._arrangement

    def drag(self, active_id: AlbumId, over_id: AlbumId) -> Arrangement:
        with self._lock:
            self._arrangement = reconcile_drag(self._arrangement, active_id, over_id)
            return self._arrangement
