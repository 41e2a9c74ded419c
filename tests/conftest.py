"""Shared pytest fixtures for vinylwall tests."""

from __future__ import annotations

import random
from collections import Counter
from typing import Iterable

import pytest

from vinylwall.models.album import Album
from vinylwall.models.arrangement import Arrangement

# ============================================================================
# Album Fixtures
# ============================================================================


def make_album(album_id: str, artist: str = "", genre: Iterable[str] = (), **kwargs) -> Album:
    """Build an Album with just the fields a test cares about."""
    return Album(id=album_id, artist=artist, title=f"Title {album_id}", genre=tuple(genre), **kwargs)


@pytest.fixture
def albums() -> dict[str, Album]:
    """Albums A-F keyed by id, with artists and genres that sort differently."""
    return {
        "A": make_album("A", artist="Nina", genre=["Jazz"]),
        "B": make_album("B", artist="Zeta", genre=["Rock"]),
        "C": make_album("C", artist="Alpha", genre=["Electronic"]),
        "D": make_album("D", artist="Mid", genre=["Blues"]),
        "E": make_album("E", artist="echo", genre=["Funk / Soul"]),
        "F": make_album("F", artist="Bravo"),
    }


@pytest.fixture
def wall(albums: dict[str, Album]) -> Arrangement:
    """display [A(pinned), B, C, D], pool [E, F]."""
    return Arrangement(
        display=tuple(albums[k] for k in "ABCD"),
        pool=tuple(albums[k] for k in "EF"),
        pinned=frozenset({"A"}),
    )


@pytest.fixture
def rng() -> random.Random:
    """Seeded generator so shuffles are reproducible."""
    return random.Random(1234)


# ============================================================================
# Helpers
# ============================================================================


def ids(albums: Iterable[Album]) -> list:
    return [a.id for a in albums]


def assert_conserved(before: Arrangement, after: Arrangement) -> None:
    """Same multiset of ids, no duplicates."""
    before_ids = Counter(ids(before.albums))
    after_ids = Counter(ids(after.albums))
    assert after_ids == before_ids
    assert all(n == 1 for n in after_ids.values())
