"""Pin set operations. Pins are album ids and only apply while the album is on display."""
from typing import AbstractSet, FrozenSet, Iterable, Sequence

from vinylwall.models.album import Album, AlbumId


def toggle_pin(
    pinned: AbstractSet[AlbumId], display: Sequence[Album], album_id: AlbumId
) -> FrozenSet[AlbumId]:
    """Flip album_id's pin. No-op if the album is not on display."""
    if not any(a.id == album_id for a in display):
        return frozenset(pinned)
    if album_id in pinned:
        return frozenset(pinned) - {album_id}
    return frozenset(pinned) | {album_id}


def are_all_pinned(pinned: AbstractSet[AlbumId], display: Sequence[Album]) -> bool:
    """True only if display is non-empty and every album in it is pinned."""
    return len(display) > 0 and all(a.id in pinned for a in display)


def toggle_pin_all(
    pinned: AbstractSet[AlbumId], display: Sequence[Album]
) -> FrozenSet[AlbumId]:
    """Unpin every displayed album if all are pinned, else pin all of them."""
    ids = {a.id for a in display}
    if are_all_pinned(pinned, display):
        return frozenset(pinned) - ids
    return frozenset(pinned) | ids


def remove_pins_for_ids(
    pinned: AbstractSet[AlbumId], album_ids: Iterable[AlbumId]
) -> FrozenSet[AlbumId]:
    return frozenset(pinned) - set(album_ids)


def prune_pins(pinned: AbstractSet[AlbumId], display: Sequence[Album]) -> FrozenSet[AlbumId]:
    """Drop pins whose album is no longer on display."""
    return frozenset(pinned) & {a.id for a in display}
