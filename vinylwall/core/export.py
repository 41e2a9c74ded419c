"""CSV export of the wall (artist, title, genre, year)."""
import csv
import io
from typing import List, Sequence, Tuple

from vinylwall.core.errors import NothingToExportError
from vinylwall.models.album import Album

CSV_HEADER = ("Artist", "Title", "Genre", "Year")


def _clean(text: str) -> str:
    return (text or "").replace(",", " ")


def export_rows(albums: Sequence[Album]) -> List[Tuple[str, str, str, str]]:
    """One row per album in the given order; only the first genre tag is kept."""
    return [
        (_clean(a.artist), _clean(a.title), _clean(a.first_genre), a.year or "")
        for a in albums
    ]


def export_csv(albums: Sequence[Album]) -> str:
    """Return the albums as CSV text with a header row."""
    if not albums:
        raise NothingToExportError("No albums to export")
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    writer.writerows(export_rows(albums))
    return buf.getvalue()
