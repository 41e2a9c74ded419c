"""Configuration: env, API host/port, grid defaults, Discogs credentials."""
import os
from pathlib import Path

from dotenv import load_dotenv

# Base paths (project root = parent of vinylwall package)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load .env from project root so DISCOGS_TOKEN etc. are set
load_dotenv(BASE_DIR / ".env")

# API
API_HOST = os.getenv("VINYLWALL_API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("VINYLWALL_API_PORT", "8000"))
# Allowed CORS origin for the web frontend (e.g. http://localhost:3000); empty = any
WEB_ORIGIN = os.getenv("VINYLWALL_WEB_ORIGIN", "")

# Wall grid defaults (4 x 8 = 32 albums)
DEFAULT_ROWS = int(os.getenv("VINYLWALL_DEFAULT_ROWS", "4"))
DEFAULT_COLUMNS = int(os.getenv("VINYLWALL_DEFAULT_COLUMNS", "8"))

# Discogs (personal access token; requests work without one but are rate limited harder)
DISCOGS_TOKEN = os.getenv("DISCOGS_TOKEN", "")
DISCOGS_API_BASE = os.getenv("DISCOGS_API_BASE", "https://api.discogs.com")
DISCOGS_USER_AGENT = os.getenv("VINYLWALL_USER_AGENT", "VinylWall/0.1")
DISCOGS_PER_PAGE = 100
DISCOGS_MAX_RETRIES = int(os.getenv("VINYLWALL_DISCOGS_MAX_RETRIES", "2"))
DISCOGS_RETRY_DELAY_SEC = 1.0
DISCOGS_TIMEOUT_SEC = 30.0

# Export
EXPORT_CSV_FILENAME = "vinyl_wall_export.csv"
