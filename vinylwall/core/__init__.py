"""Core: arrangement engine (capacity, pins, sort, shuffle, drag), Discogs fetch, export."""
from vinylwall.core.arrangement_store import ArrangementStore
from vinylwall.core.drag import reconcile_drag
from vinylwall.core.shuffle import shuffle_arrangement
from vinylwall.core.sorting import sort_arrangement

__all__ = ["ArrangementStore", "reconcile_drag", "shuffle_arrangement", "sort_arrangement"]
