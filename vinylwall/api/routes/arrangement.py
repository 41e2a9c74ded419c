"""Wall arrangement: dimensions, pins, sort, shuffle, drag-and-drop."""
from typing import Union

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from vinylwall.api.routes.serialize import arrangement_to_dict
from vinylwall.api.state import AppState, get_state
from vinylwall.models.arrangement import SortOption

router = APIRouter()


class DimensionsBody(BaseModel):
    rows: int = Field(ge=1)
    columns: int = Field(ge=1)


class SortBody(BaseModel):
    option: SortOption


class DragBody(BaseModel):
    """Ids as the client knows them; strings and integers are both accepted."""
    active_id: Union[int, str]
    over_id: Union[int, str]


@router.get("")
def get_arrangement(state: AppState = Depends(get_state)):
    """Return display, pool, pins, dimensions and sort option."""
    return arrangement_to_dict(state.store)


@router.put("/dimensions")
def set_dimensions(body: DimensionsBody, state: AppState = Depends(get_state)):
    """Resize the wall; albums move across the display/pool boundary without reordering."""
    arrangement = state.store.set_dimensions(body.rows, body.columns)
    return arrangement_to_dict(state.store, arrangement)


@router.post("/dimensions/reset")
def reset_dimensions(state: AppState = Depends(get_state)):
    arrangement = state.store.reset_dimensions()
    return arrangement_to_dict(state.store, arrangement)


@router.post("/pins")
def toggle_pin_all(state: AppState = Depends(get_state)):
    """Pin every displayed album, or unpin them all if they already are."""
    arrangement = state.store.toggle_pin_all()
    return arrangement_to_dict(state.store, arrangement)


@router.post("/pins/{album_id}")
def toggle_pin(album_id: str, state: AppState = Depends(get_state)):
    """Toggle one album's pin. Albums in the pool cannot be pinned (no change)."""
    resolved = state.store.find_album_id(album_id)
    if resolved is None:
        raise HTTPException(status_code=404, detail="Album not found")
    arrangement = state.store.toggle_pin(resolved)
    return arrangement_to_dict(state.store, arrangement)


@router.put("/sort")
def set_sort(body: SortBody, state: AppState = Depends(get_state)):
    """Sort display and pool; pinned albums keep their slots."""
    arrangement = state.store.set_sort(body.option)
    return arrangement_to_dict(state.store, arrangement)


@router.post("/shuffle")
def shuffle(state: AppState = Depends(get_state)):
    arrangement = state.store.shuffle()
    return arrangement_to_dict(state.store, arrangement)


@router.post("/drag")
def drag(body: DragBody, state: AppState = Depends(get_state)):
    """Apply a drop of active_id onto over_id. Rejected drops return the arrangement unchanged."""
    store = state.store
    active_id = store.find_album_id(str(body.active_id))
    over_id = store.find_album_id(str(body.over_id))
    if active_id is None or over_id is None:
        return arrangement_to_dict(store)
    arrangement = store.drag(active_id, over_id)
    return arrangement_to_dict(store, arrangement)
