"""Error types for the catalog fetch and export collaborators.

Arrangement operations never raise: invalid input is a silent no-op.
"""


class VinylWallError(Exception):
    """Base class for vinylwall errors."""


class CatalogError(VinylWallError):
    """Collection fetch failed; str(error) is a message fit for the user."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class InvalidUsernameError(CatalogError):
    pass


class UserNotFoundError(CatalogError):
    pass


class EmptyCollectionError(CatalogError):
    pass


class RateLimitError(CatalogError):
    pass


class CatalogAuthError(CatalogError):
    pass


class CatalogServerError(CatalogError):
    pass


class CatalogUnavailableError(CatalogError):
    """No response at all (network down, DNS, timeout)."""


class NothingToExportError(VinylWallError):
    pass
