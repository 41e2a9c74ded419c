"""Tests for ArrangementStore: loading, resizing and sequencing operations."""

from __future__ import annotations

import random

import pytest

from vinylwall.core.arrangement_store import ArrangementStore
from vinylwall.models.album import Album
from vinylwall.models.arrangement import SortOption

from tests.conftest import ids, make_album


@pytest.fixture
def store(albums: dict[str, Album]) -> ArrangementStore:
    """2x2 store loaded with A-F."""
    s = ArrangementStore(rows=2, columns=2, rng=random.Random(42))
    s.load(albums.values())
    return s


class TestLoad:
    """Loading slices the collection by capacity."""

    def test_slices_by_capacity(self, store: ArrangementStore) -> None:
        """Test the first four albums go on display."""
        assert ids(store.display) == ["A", "B", "C", "D"]
        assert ids(store.pool) == ["E", "F"]
        assert store.capacity == 4

    def test_reload_clears_pins_and_sort(self, store: ArrangementStore, albums: dict[str, Album]) -> None:
        """Test a fresh load starts with no pins and no sort."""
        store.toggle_pin("A")
        store.set_sort(SortOption.ARTIST)

        store.load(albums.values())

        assert store.arrangement.pinned == frozenset()
        assert store.sort_option == SortOption.NONE

    def test_invalid_initial_dimensions(self) -> None:
        """Test the constructor refuses a zero-sized grid."""
        with pytest.raises(ValueError):
            ArrangementStore(rows=0, columns=3)


class TestDimensions:
    """Resizing through the store."""

    def test_resize_scenario(self, store: ArrangementStore) -> None:
        """Test 2x2 -> 1x2 keeps pins at index 0 and 1 and drops the rest."""
        store.toggle_pin("A")
        store.toggle_pin("B")
        store.toggle_pin("C")

        store.set_dimensions(1, 2)

        assert ids(store.display) == ["A", "B"]
        assert ids(store.pool) == ["C", "D", "E", "F"]
        assert store.arrangement.pinned == frozenset("AB")
        assert (store.dimensions.rows, store.dimensions.columns) == (1, 2)

    def test_invalid_dimensions_ignored(self, store: ArrangementStore) -> None:
        """Test rows or columns below 1 leave everything as it was."""
        before = store.arrangement

        store.set_dimensions(0, 5)
        store.set_dimensions(3, -1)

        assert store.arrangement == before
        assert store.capacity == 4

    def test_same_capacity_only_changes_shape(self, store: ArrangementStore) -> None:
        """Test 2x2 -> 4x1 keeps the arrangement and records new dimensions."""
        before = store.arrangement

        store.set_dimensions(4, 1)

        assert store.arrangement == before
        assert store.dimensions.rows == 4

    def test_reset_restores_defaults(self, store: ArrangementStore) -> None:
        """Test reset goes back to the dimensions the store was built with."""
        store.set_dimensions(3, 2)

        store.reset_dimensions()

        assert store.capacity == 4
        assert ids(store.display) == ["A", "B", "C", "D"]


class TestOperations:
    """Pins, sort, shuffle and drag through the store."""

    def test_sort_records_option(self, store: ArrangementStore) -> None:
        """Test the sort option is kept and the display is sorted around pins."""
        store.toggle_pin("A")

        store.set_sort(SortOption.ARTIST)

        assert store.sort_option == SortOption.ARTIST
        assert ids(store.display) == ["A", "C", "D", "B"]

    def test_sort_accepts_plain_string(self, store: ArrangementStore) -> None:
        """Test "genre" is accepted as well as SortOption.GENRE."""
        store.set_sort("genre")

        assert store.sort_option == SortOption.GENRE

    def test_toggle_pin_all_and_query(self, store: ArrangementStore) -> None:
        """Test pin-all then are_all_pinned."""
        store.toggle_pin_all()

        assert store.are_all_pinned()
        assert store.is_pinned("D")

    def test_shuffle_all_pinned(self, store: ArrangementStore) -> None:
        """Test a fully pinned display survives shuffle unchanged."""
        store.toggle_pin_all()
        before = store.display

        store.shuffle()

        assert store.display == before

    def test_drag_to_pool_unpins(self, store: ArrangementStore) -> None:
        """Test dragging a pinned album into the pool drops its pin."""
        store.toggle_pin("B")

        store.drag("B", "E")

        assert ids(store.display) == ["A", "E", "C", "D"]
        assert not store.is_pinned("B")

    def test_find_album_id_matches_integer_ids(self) -> None:
        """Test wire ids (strings) resolve to integer album ids."""
        s = ArrangementStore(rows=1, columns=2)
        s.load([Album(id=101), Album(id=202), Album(id=303)])

        assert s.find_album_id("202") == 202
        assert s.find_album_id("999") is None


def test_random_operation_sequence_keeps_invariants() -> None:
    """Test conservation, capacity and pin validity over a long random run."""
    collection = [make_album(str(i), artist=f"Artist {i % 7}", genre=[f"G{i % 3}"]) for i in range(30)]
    expected = sorted(a.id for a in collection)
    driver = random.Random(7)
    store = ArrangementStore(rows=3, columns=4, rng=random.Random(8))
    store.load(collection)

    for _ in range(300):
        arrangement = store.arrangement
        every_id = ids(arrangement.albums)
        op = driver.choice(["pin", "pin_all", "sort", "shuffle", "drag", "resize"])
        if op == "pin" and arrangement.display:
            store.toggle_pin(driver.choice(arrangement.display).id)
        elif op == "pin_all":
            store.toggle_pin_all()
        elif op == "sort":
            store.set_sort(driver.choice(list(SortOption)))
        elif op == "shuffle":
            pinned_at = {a.id: i for i, a in enumerate(arrangement.display) if a.id in arrangement.pinned}
            store.shuffle()
            for album_id, index in pinned_at.items():
                assert store.display[index].id == album_id
        elif op == "drag":
            store.drag(driver.choice(every_id), driver.choice(every_id))
        else:
            store.set_dimensions(driver.randint(0, 5), driver.randint(1, 6))

        after = store.arrangement
        assert sorted(ids(after.albums)) == expected
        assert len(after.display) == min(store.capacity, len(collection))
        assert after.pinned <= set(ids(after.display))
