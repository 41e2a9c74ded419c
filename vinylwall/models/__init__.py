"""Data models for albums and wall arrangement state."""
from vinylwall.models.album import Album, AlbumId, normalize_genre
from vinylwall.models.arrangement import Arrangement, Dimensions, SortOption

__all__ = [
    "Album",
    "AlbumId",
    "Arrangement",
    "Dimensions",
    "SortOption",
    "normalize_genre",
]
