"""Grid capacity: move the display/pool boundary when dimensions change."""
import logging

from vinylwall.core.pinning import remove_pins_for_ids
from vinylwall.models.arrangement import Arrangement

logger = logging.getLogger(__name__)


def redistribute(arrangement: Arrangement, old_capacity: int, new_capacity: int) -> Arrangement:
    """Re-slice display ++ pool at new_capacity without reordering.

    Shrinking drops pins for albums whose display index is >= new_capacity.
    """
    if new_capacity == old_capacity:
        return arrangement
    pinned = arrangement.pinned
    if new_capacity < old_capacity:
        leaving = [a.id for a in arrangement.display[new_capacity:]]
        dropped = pinned.intersection(leaving)
        if dropped:
            logger.info("Unpinning %d album(s) pushed out of the display", len(dropped))
        pinned = remove_pins_for_ids(pinned, leaving)
    everything = arrangement.albums
    return Arrangement(
        display=everything[:new_capacity],
        pool=everything[new_capacity:],
        pinned=pinned,
    )
