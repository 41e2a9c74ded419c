"""Drag-and-drop reconciliation between the wall display and the pool.

Each function takes the current Arrangement and returns a new one. A drop that
cannot be applied cleanly (pinned target, unknown id) returns the input
unchanged, never a half-applied state.
"""
import logging
from typing import AbstractSet, List, Optional, Sequence

from vinylwall.models.album import Album, AlbumId
from vinylwall.models.arrangement import Arrangement

logger = logging.getLogger(__name__)

DISPLAY = "display"
POOL = "pool"


def array_move(items: Sequence[Album], from_index: int, to_index: int) -> List[Album]:
    """Move the item at from_index so it ends up at to_index."""
    out = list(items)
    out.insert(to_index, out.pop(from_index))
    return out


def container_of(arrangement: Arrangement, album_id: AlbumId) -> Optional[str]:
    """Return DISPLAY, POOL, or None if album_id is in neither."""
    if arrangement.index_in_display(album_id) >= 0:
        return DISPLAY
    if arrangement.index_in_pool(album_id) >= 0:
        return POOL
    return None


def reorder_within_display(
    display: Sequence[Album],
    active_id: AlbumId,
    over_id: AlbumId,
    pinned: AbstractSet[AlbumId],
) -> List[Album]:
    """Move active_id to over_id's place among unpinned albums only.

    Pinned albums keep their index: the moved unpinned run is threaded back
    through the slots that were not pinned.
    """
    unpinned = [a for a in display if a.id not in pinned]
    active_index = next((i for i, a in enumerate(unpinned) if a.id == active_id), -1)
    over_index = next((i for i, a in enumerate(unpinned) if a.id == over_id), -1)
    if active_index < 0 or over_index < 0:
        return list(display)
    reordered = iter(array_move(unpinned, active_index, over_index))
    return [a if a.id in pinned else next(reordered) for a in display]


def _first_unpinned_at_or_after(
    display: Sequence[Album], start: int, pinned: AbstractSet[AlbumId]
) -> int:
    index = start
    while index < len(display) and display[index].id in pinned:
        index += 1
    return index


def move_display_to_pool(
    arrangement: Arrangement, active_index: int, over_index: int
) -> Arrangement:
    """Active display album takes the target's pool slot; the target joins the display.

    The target album is inserted at the first unpinned display index at or after
    the one the active album vacated (forward scan; appended if every later slot
    is pinned). The active album loses its pin.
    """
    display = list(arrangement.display)
    pool = list(arrangement.pool)
    pinned = arrangement.pinned - {display[active_index].id}

    active = display.pop(active_index)
    over = pool[over_index]
    pool[over_index] = active

    insert_at = _first_unpinned_at_or_after(display, active_index, pinned)
    if insert_at < len(display):
        display.insert(insert_at, over)
    else:
        display.append(over)
    return Arrangement(display=tuple(display), pool=tuple(pool), pinned=pinned)


def move_pool_to_display(
    arrangement: Arrangement, active_index: int, over_index: int
) -> Arrangement:
    """Active pool album replaces the (unpinned) target display album.

    The displaced album drops into the pool where the active album was.
    """
    display = list(arrangement.display)
    pool = list(arrangement.pool)
    active = pool[active_index]
    displaced = display[over_index]
    display[over_index] = active
    pool[active_index] = displaced
    return Arrangement(display=tuple(display), pool=tuple(pool), pinned=arrangement.pinned)


def reconcile_drag(
    arrangement: Arrangement, active_id: AlbumId, over_id: AlbumId
) -> Arrangement:
    """Apply a drop of active_id onto over_id and return the new arrangement."""
    if over_id in arrangement.pinned:
        logger.debug("Drop on pinned album %s rejected", over_id)
        return arrangement

    active_container = container_of(arrangement, active_id)
    over_container = container_of(arrangement, over_id)
    if active_container is None or over_container is None:
        logger.debug("Drag %s -> %s: unknown album id, ignored", active_id, over_id)
        return arrangement
    if active_id == over_id:
        return arrangement

    if active_container == over_container == POOL:
        pool = array_move(
            arrangement.pool,
            arrangement.index_in_pool(active_id),
            arrangement.index_in_pool(over_id),
        )
        return Arrangement(display=arrangement.display, pool=tuple(pool), pinned=arrangement.pinned)

    if active_container == over_container == DISPLAY:
        if active_id in arrangement.pinned:
            logger.debug("Pinned album %s cannot be reordered", active_id)
            return arrangement
        display = reorder_within_display(
            arrangement.display, active_id, over_id, arrangement.pinned
        )
        return Arrangement(display=tuple(display), pool=arrangement.pool, pinned=arrangement.pinned)

    if active_container == DISPLAY:
        return move_display_to_pool(
            arrangement,
            arrangement.index_in_display(active_id),
            arrangement.index_in_pool(over_id),
        )
    return move_pool_to_display(
        arrangement,
        arrangement.index_in_pool(active_id),
        arrangement.index_in_display(over_id),
    )
