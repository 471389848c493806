"""Mini README: Object-storage listing client.

Structure:
    * StorageObject - immutable snapshot of one object's listing metadata.
    * StorageListingClient - issues the single folder listing request.

The client speaks the Google Cloud Storage JSON API: one GET against
``/b/<bucket>/o`` with ``prefix`` and ``delimiter=/`` so only objects
directly inside the configured folder come back. Results are not paginated;
a ``nextPageToken`` in the response is logged and otherwise ignored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import httpx

from ..configuration import ShopCatalogSettings
from ..errors import ProcessingFailure, UpstreamFailure
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class StorageObject:
    """Metadata for one object returned by the listing API."""

    name: str
    bucket: Optional[str] = None
    content_type: Optional[str] = None
    size: Optional[str] = None
    time_created: Optional[str] = None
    updated: Optional[str] = None

    @property
    def filename(self) -> str:
        """Object name with any folder path removed."""

        return self.name.rsplit("/", 1)[-1] or self.name

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "StorageObject":
        """Build from a JSON API record, which must carry a string ``name``."""

        if not isinstance(record, Mapping):
            raise ProcessingFailure(f"Listing record must be an object, got {record!r}")
        name = record.get("name")
        if not isinstance(name, str) or not name:
            raise ProcessingFailure(f"Listing record without a name: {dict(record)!r}")
        size = record.get("size")
        return cls(
            name=name,
            bucket=record.get("bucket"),
            content_type=record.get("contentType"),
            size=None if size is None else str(size),
            time_created=record.get("timeCreated"),
            updated=record.get("updated"),
        )


class StorageListingClient:
    """Fetch the objects stored directly under the configured folder."""

    def __init__(
        self,
        settings: ShopCatalogSettings,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.settings = settings
        self._transport = transport

    def _query_params(self) -> Dict[str, str]:
        return {"prefix": self.settings.folder_prefix, "delimiter": "/"}

    async def list_objects(self) -> List[StorageObject]:
        """Return the folder's objects, raising ``UpstreamFailure`` on any HTTP problem."""

        url = self.settings.listing_url
        LOGGER.info("Listing gs://%s/%s", self.settings.bucket_name, self.settings.folder_prefix)
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.request_timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(url, params=self._query_params())
        except httpx.RequestError as error:
            raise UpstreamFailure(f"Failed to fetch from storage: {error}") from error

        if not response.is_success:
            LOGGER.error("Storage listing returned HTTP %s", response.status_code)
            raise UpstreamFailure(
                f"Failed to fetch from storage: {response.reason_phrase}",
                status_code=response.status_code,
            )
        return self._parse(response)

    def _parse(self, response: httpx.Response) -> List[StorageObject]:
        try:
            payload = response.json()
        except ValueError as error:
            raise ProcessingFailure("Storage listing response is not valid JSON") from error
        if not isinstance(payload, dict):
            raise ProcessingFailure("Storage listing response must be a JSON object")

        records = payload.get("items") or []
        if not isinstance(records, list):
            raise ProcessingFailure("Storage listing 'items' must be a list")
        if payload.get("nextPageToken"):
            LOGGER.debug("Listing is paginated; only the first page is used")

        objects = [StorageObject.from_api(record) for record in records]
        LOGGER.info("Storage listing returned %s objects", len(objects))
        return objects
