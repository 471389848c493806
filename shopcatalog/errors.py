"""Mini README: Exception hierarchy for the shop catalog service.

Structure:
    * ShopCatalogError - base class for every failure raised by the package.
    * UpstreamFailure - the storage listing call failed or returned non-2xx.
    * ProcessingFailure - the listing payload could not be turned into items.

The web layer converts any of these (and anything unexpected) into the
structured 500 response, so callers rarely need to distinguish them.
"""

from __future__ import annotations

from typing import Optional


class ShopCatalogError(Exception):
    """Base error for catalog building failures."""


class UpstreamFailure(ShopCatalogError):
    """Raised when the object-storage listing request does not succeed."""

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProcessingFailure(ShopCatalogError):
    """Raised when a listing response is malformed."""
