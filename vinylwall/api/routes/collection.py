"""Load a Discogs collection into the wall."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from vinylwall.api.routes.serialize import arrangement_to_dict
from vinylwall.api.state import AppState, get_state
from vinylwall.core.errors import (
    CatalogError,
    CatalogUnavailableError,
    EmptyCollectionError,
    InvalidUsernameError,
    RateLimitError,
    UserNotFoundError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class LoadCollectionBody(BaseModel):
    username: str


def _status_for(error: CatalogError) -> int:
    if isinstance(error, InvalidUsernameError):
        return 400
    if isinstance(error, (UserNotFoundError, EmptyCollectionError)):
        return 404
    if isinstance(error, RateLimitError):
        return 429
    if isinstance(error, CatalogUnavailableError):
        return 503
    return 502


@router.post("")
def load_collection(body: LoadCollectionBody, state: AppState = Depends(get_state)):
    """Fetch the user's collection and lay it out on a fresh wall."""
    try:
        state.load_collection(body.username)
    except CatalogError as e:
        logger.warning("Loading collection for %r failed: %s", body.username, e)
        raise HTTPException(status_code=_status_for(e), detail=e.message)
    return {"username": state.username, **arrangement_to_dict(state.store)}


@router.get("")
def get_collection(state: AppState = Depends(get_state)):
    """Return the loaded username and album count."""
    return {"username": state.username or None, "count": len(state.store.arrangement.albums)}
