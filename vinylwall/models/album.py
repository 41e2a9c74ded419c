"""Album value and field normalization."""
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple, Union

AlbumId = Union[str, int]


def normalize_genre(value: Any) -> Tuple[str, ...]:
    """Return genre as a tuple of strings (absent -> (), plain string -> one tag)."""
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,) if value else ()
    try:
        return tuple(str(g) for g in value if g is not None)
    except TypeError:
        return ()


@dataclass(frozen=True)
class Album:
    """One release in the collection. Only its position ever changes."""
    id: AlbumId
    artist: str = ""
    title: str = ""
    genre: Tuple[str, ...] = field(default_factory=tuple)
    year: Optional[str] = None
    cover_ref: Optional[str] = None

    def __post_init__(self) -> None:
        # Frozen: normalize through object.__setattr__
        object.__setattr__(self, "artist", self.artist or "")
        object.__setattr__(self, "title", self.title or "")
        object.__setattr__(self, "genre", normalize_genre(self.genre))

    @property
    def first_genre(self) -> str:
        return self.genre[0] if self.genre else ""

    @classmethod
    def from_dict(cls, data: dict) -> "Album":
        """Build from a loose mapping (missing fields become empty)."""
        year = data.get("year")
        return cls(
            id=data["id"],
            artist=data.get("artist") or "",
            title=data.get("title") or "",
            genre=normalize_genre(data.get("genre")),
            year=str(year) if year not in (None, "") else None,
            cover_ref=data.get("cover_ref") or data.get("cover_image") or None,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "artist": self.artist,
            "title": self.title,
            "genre": list(self.genre),
            "year": self.year,
            "cover_ref": self.cover_ref,
        }
