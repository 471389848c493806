"""Mini README: FastAPI application serving the shop catalog.

Structure:
    * create_application - application factory wiring the catalog route.
    * SHOP_ITEMS_PATH - public path of the catalog endpoint.

The endpoint lists the bucket folder on every request and relies on the
``Cache-Control`` header for shared caching. Failures never leak partial
results: any exception becomes a 500 with ``error`` and ``details``.
"""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.responses import JSONResponse

from ..catalog import CatalogService
from ..catalog.listing import ListingClient
from ..configuration import ShopCatalogSettings, get_settings
from ..logging_utils import get_logger
from ..storage import StorageListingClient

LOGGER = get_logger(__name__)

SHOP_ITEMS_PATH = "/api/shop-items.json"
FAILURE_MESSAGE = "Failed to fetch shop items"


def create_application(
    settings: Optional[ShopCatalogSettings] = None,
    listing_client: Optional[ListingClient] = None,
) -> FastAPI:
    """Create the FastAPI application; arguments default to the live configuration."""

    settings = settings or get_settings()
    listing_client = listing_client or StorageListingClient(settings)
    service = CatalogService(settings, listing_client)

    app = FastAPI(title="Shop Catalog", version="0.1.0")

    @app.get(SHOP_ITEMS_PATH)
    async def shop_items() -> JSONResponse:
        """Return the sorted catalog of product photos."""

        try:
            payload = await service.fetch_payload()
        except Exception as error:
            LOGGER.exception("Error fetching shop items")
            return JSONResponse(
                {"error": FAILURE_MESSAGE, "details": str(error) or "Unknown error"},
                status_code=500,
            )
        LOGGER.debug("Returning %s shop items", len(payload["items"]))
        return JSONResponse(
            payload,
            headers={"Cache-Control": f"public, max-age={settings.cache_max_age}"},
        )

    return app
