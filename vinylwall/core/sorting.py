"""Sort display and pool by artist or genre while pinned display slots stay put."""
import unicodedata
from typing import AbstractSet, Callable, List, Sequence, Tuple

from vinylwall.models.album import Album, AlbumId
from vinylwall.models.arrangement import SortOption

SortKey = Callable[[Album], Tuple[str, str, str]]


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def collation_key(text: str) -> Tuple[str, str, str]:
    """Locale-style ordering for Latin text, close to a browser's localeCompare.

    Primary: letters ignoring accents and case. Secondary: accents.
    Tertiary: case, lowercase before uppercase ("a" < "A" < "b").
    """
    text = unicodedata.normalize("NFC", text or "")
    return (_strip_accents(text).casefold(), text.casefold(), text.swapcase())


def _artist_key(album: Album) -> Tuple[str, str, str]:
    return collation_key(album.artist)


def _genre_key(album: Album) -> Tuple[str, str, str]:
    return collation_key(album.first_genre)


_SORT_KEYS = {
    SortOption.ARTIST: _artist_key,
    SortOption.GENRE: _genre_key,
}


def key_for(option: SortOption) -> SortKey | None:
    """Return the sort key for option, or None for SortOption.NONE."""
    return _SORT_KEYS.get(SortOption(option))


def sort_with_pins(
    albums: Sequence[Album], key: SortKey, pinned: AbstractSet[AlbumId]
) -> List[Album]:
    """Sort albums; pinned ones keep their index and the rest fill the gaps in order."""
    if not pinned:
        return sorted(albums, key=key)
    movable = sorted((a for a in albums if a.id not in pinned), key=key)
    it = iter(movable)
    return [a if a.id in pinned else next(it) for a in albums]


def sort_arrangement(
    display: Sequence[Album],
    pool: Sequence[Album],
    option: SortOption,
    pinned: AbstractSet[AlbumId],
) -> Tuple[List[Album], List[Album]]:
    """Return (display', pool') sorted by option. SortOption.NONE is identity."""
    key = key_for(option)
    if key is None:
        return list(display), list(pool)
    return sort_with_pins(display, key, pinned), sorted(pool, key=key)
