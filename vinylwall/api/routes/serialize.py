"""Response shapes shared by the routes."""
from vinylwall.core.arrangement_store import ArrangementStore
from vinylwall.core import pinning
from vinylwall.models.arrangement import Arrangement


def arrangement_to_dict(store: ArrangementStore, arrangement: Arrangement | None = None) -> dict:
    arrangement = arrangement or store.arrangement
    dimensions = store.dimensions
    return {
        "rows": dimensions.rows,
        "columns": dimensions.columns,
        "capacity": dimensions.capacity,
        "sort_option": store.sort_option.value,
        "display": [a.to_dict() for a in arrangement.display],
        "pool": [a.to_dict() for a in arrangement.pool],
        # In display order
        "pinned": [a.id for a in arrangement.display if a.id in arrangement.pinned],
        "all_pinned": pinning.are_all_pinned(arrangement.pinned, arrangement.display),
    }
