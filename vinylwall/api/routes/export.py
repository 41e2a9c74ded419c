"""CSV export of the current wall."""
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from vinylwall.api.state import AppState, get_state
from vinylwall.config import EXPORT_CSV_FILENAME
from vinylwall.core.errors import NothingToExportError
from vinylwall.core.export import export_csv

router = APIRouter()


@router.get("/csv")
def export_wall_csv(
    scope: Literal["display", "all"] = "display",
    state: AppState = Depends(get_state),
):
    """Download the display (or display + pool) as CSV, in render order."""
    arrangement = state.store.arrangement
    albums = arrangement.display if scope == "display" else arrangement.albums
    try:
        body = export_csv(albums)
    except NothingToExportError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(
        content=body,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_CSV_FILENAME}"'},
    )
