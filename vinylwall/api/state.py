"""Shared application state (injected into routes)."""
from typing import List, Optional

from vinylwall.core.arrangement_store import ArrangementStore
from vinylwall.core.discogs_client import fetch_collection
from vinylwall.models.album import Album


class AppState:
    def __init__(self, store: Optional[ArrangementStore] = None) -> None:
        self.store = store or ArrangementStore()
        self._username: str = ""

    @property
    def username(self) -> str:
        return self._username

    @property
    def has_collection(self) -> bool:
        return bool(self._username)

    def load_collection(self, username: str) -> List[Album]:
        """Fetch from Discogs and load into the store. On error the old collection stays."""
        albums = fetch_collection(username)
        self.store.load(albums)
        self._username = username.strip()
        return albums


_state = AppState()


def get_state() -> AppState:
    return _state
