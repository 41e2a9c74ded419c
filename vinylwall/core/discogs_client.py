"""Discogs collection client via httpx; maps failures to CatalogError messages."""
import logging
import re
import time
from typing import Callable, List, Optional

import httpx

from vinylwall.config import (
    DISCOGS_API_BASE,
    DISCOGS_MAX_RETRIES,
    DISCOGS_PER_PAGE,
    DISCOGS_RETRY_DELAY_SEC,
    DISCOGS_TIMEOUT_SEC,
    DISCOGS_TOKEN,
    DISCOGS_USER_AGENT,
)
from vinylwall.core.errors import (
    CatalogAuthError,
    CatalogError,
    CatalogServerError,
    CatalogUnavailableError,
    EmptyCollectionError,
    InvalidUsernameError,
    RateLimitError,
    UserNotFoundError,
)
from vinylwall.models.album import Album, normalize_genre

logger = logging.getLogger(__name__)

_USERNAME_REGEX = re.compile(r"^[a-zA-Z0-9._-]{2,}$")

INVALID_USERNAME_MESSAGE = (
    "Invalid username format. Usernames should contain only letters, numbers, "
    "dots, underscores, or hyphens."
)


def validate_username(username: str) -> bool:
    """Basic Discogs username check: 2+ of letters, digits, dot, underscore, hyphen."""
    return bool(_USERNAME_REGEX.match((username or "").strip()))


def _join_artists(artists: Optional[list]) -> str:
    """Join artist names the way Discogs credits them (each later artist's 'join' or ', ')."""
    if not artists:
        return "Unknown Artist"
    name = artists[0].get("name") or ""
    for artist in artists[1:]:
        name += (artist.get("join") or ", ") + (artist.get("name") or "")
    return name


def album_from_release(release: dict) -> Album:
    """Map one entry of the collection releases list to an Album."""
    info = release.get("basic_information") or {}
    year = info.get("year")
    return Album(
        id=release["id"],
        title=info.get("title") or "",
        artist=_join_artists(info.get("artists")),
        genre=normalize_genre(info.get("genres")),
        year=str(year) if year else None,
        cover_ref=info.get("cover_image") or None,
    )


def _error_for_response(username: str, response: httpx.Response) -> CatalogError:
    status = response.status_code
    if status == 404:
        return UserNotFoundError(f'User "{username}" not found on Discogs', status)
    if status == 429:
        return RateLimitError("Rate limit exceeded. Please try again in a few minutes.", status)
    if status == 401:
        return CatalogAuthError(
            "Authentication failed. Please check your Discogs API token.", status
        )
    if status >= 500:
        return CatalogServerError(
            "Discogs server error. The service may be experiencing issues. "
            "Please try again later.",
            status,
        )
    return CatalogError(
        f"Discogs API error: {status} - {response.reason_phrase or 'Unknown error'}", status
    )


def _headers() -> dict:
    headers = {"User-Agent": DISCOGS_USER_AGENT}
    if DISCOGS_TOKEN:
        headers["Authorization"] = f"Discogs token={DISCOGS_TOKEN}"
    return headers


def _get_with_retry(
    client: httpx.Client,
    url: str,
    params: dict,
    username: str,
    retries: int,
    delay: float,
    sleep: Callable[[float], None],
) -> httpx.Response:
    """GET with exponential backoff. 404 is final; other failures are retried."""
    while True:
        try:
            response = client.get(url, params=params, headers=_headers())
        except httpx.HTTPError as e:
            if retries <= 0:
                raise CatalogUnavailableError(
                    "No response from Discogs API. Please check your network connection."
                ) from e
            logger.warning("Discogs request failed (%s), retrying in %.1fs", e, delay)
        else:
            if response.is_success:
                return response
            if response.status_code == 404 or retries <= 0:
                raise _error_for_response(username, response)
            logger.warning(
                "Discogs returned %d, retrying in %.1fs (%d attempts left)",
                response.status_code,
                delay,
                retries,
            )
        sleep(delay)
        retries -= 1
        delay *= 2


def fetch_collection(
    username: str,
    *,
    client: Optional[httpx.Client] = None,
    max_retries: int = DISCOGS_MAX_RETRIES,
    retry_delay: float = DISCOGS_RETRY_DELAY_SEC,
    sleep: Callable[[float], None] = time.sleep,
) -> List[Album]:
    """Fetch the first page of a user's collection (folder 0) as Albums.

    Raises a CatalogError subclass whose message can be shown to the user.
    """
    username = (username or "").strip()
    if not username:
        raise InvalidUsernameError("Username cannot be empty")
    if not validate_username(username):
        raise InvalidUsernameError(INVALID_USERNAME_MESSAGE)
    if not DISCOGS_TOKEN:
        logger.warning("No Discogs API token configured; requests may be rate limited.")

    url = f"{DISCOGS_API_BASE.rstrip('/')}/users/{username}/collection/folders/0/releases"
    params = {"per_page": DISCOGS_PER_PAGE, "sort": "artist"}
    logger.info("Requesting collection from %s", url)

    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=DISCOGS_TIMEOUT_SEC)
    try:
        response = _get_with_retry(
            client, url, params, username, max_retries, retry_delay, sleep
        )
    finally:
        if owns_client:
            client.close()

    try:
        data = response.json()
    except ValueError as e:
        raise CatalogError("Discogs returned an unreadable response.") from e
    releases = data.get("releases") if isinstance(data, dict) else None
    if not releases or not isinstance(releases, list):
        raise EmptyCollectionError(f'User "{username}" has no vinyl records in their collection')

    albums = [album_from_release(r) for r in releases]
    logger.info("Fetched %d release(s) for %s", len(albums), username)
    return albums
