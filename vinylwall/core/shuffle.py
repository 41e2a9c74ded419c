"""Shuffle unpinned albums across the free display slots and the pool."""
import random
from typing import AbstractSet, List, Optional, Sequence, Tuple

from vinylwall.models.album import Album, AlbumId


def shuffle_arrangement(
    display: Sequence[Album],
    pool: Sequence[Album],
    pinned: AbstractSet[AlbumId],
    rng: Optional[random.Random] = None,
) -> Tuple[List[Album], List[Album]]:
    """Return (display', pool') with every unpinned album randomly redistributed.

    Pinned display albums keep their index. Unpinned display albums and the pool
    are permuted together (uniformly, via rng.shuffle); the first free-slot-count
    of them fill the unpinned display slots left to right, the rest form the pool.
    Pass a seeded random.Random for reproducible results.
    """
    rng = rng or random.Random()
    pinned_at = {i: a for i, a in enumerate(display) if a.id in pinned}
    candidates = [a for a in display if a.id not in pinned] + list(pool)
    rng.shuffle(candidates)

    available_slots = len(display) - len(pinned_at)
    for_display = iter(candidates[:available_slots])
    new_pool = candidates[available_slots:]

    new_display = [
        pinned_at[i] if i in pinned_at else next(for_display) for i in range(len(display))
    ]
    return new_display, new_pool
