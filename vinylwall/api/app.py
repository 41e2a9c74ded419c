"""FastAPI app, CORS, and route registration."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(name)s: %(message)s",
)

from vinylwall.api.state import AppState, get_state
from vinylwall.config import WEB_ORIGIN

# Import routes after state to avoid circular imports
from vinylwall.api.routes import arrangement, collection, export

__all__ = ["app", "AppState", "get_state"]

app = FastAPI(
    title="Vinyl Wall API",
    description="Arrange a Discogs collection as a wall grid plus overflow pool",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[WEB_ORIGIN] if WEB_ORIGIN else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(collection.router, prefix="/api/collection", tags=["collection"])
app.include_router(arrangement.router, prefix="/api/arrangement", tags=["arrangement"])
app.include_router(export.router, prefix="/api/export", tags=["export"])
