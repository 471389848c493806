"""Mini README: Shop catalog assembly from a storage listing.

Structure:
    * CatalogEntry - display-ready record for one product photo.
    * matches_filename_shape / has_image_extension - eligibility gates.
    * select_eligible - applies every gate in order.
    * build_entry / sort_entries - enrichment and two-tier ordering.
    * CatalogService - fetch, filter, classify and sort in one call.

Objects failing a gate are dropped silently. Objects that pass but match no
pricing rule stay in the catalog as "Not Priced" and sort to the end.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from ..classification import ItemStatus, ProductClassifier, is_excluded
from ..configuration import ShopCatalogSettings
from ..errors import ProcessingFailure, ShopCatalogError
from ..logging_utils import get_logger
from ..storage import StorageObject

LOGGER = get_logger(__name__)

FILENAME_SHAPE = re.compile(r"[A-Za-z]{2,3}\d{2,3}\.[a-zA-Z]+", re.ASCII)
DEFAULT_CONTENT_TYPE = "image/jpeg"


class ListingClient(Protocol):
    """Anything that can list the configured folder, e.g. ``StorageListingClient``."""

    async def list_objects(self) -> List[StorageObject]:
        ...


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """One shop item as returned to clients."""

    id: str
    filename: str
    image_url: str
    title: str
    price: str
    content_type: str
    status: Optional[ItemStatus] = None
    pair_price: Optional[str] = None

    @property
    def is_priced(self) -> bool:
        return self.status is not ItemStatus.NOT_PRICED

    def as_dict(self) -> Dict[str, str]:
        """Export with the JSON field names; absent optionals are omitted."""

        payload = {
            "id": self.id,
            "filename": self.filename,
            "imageUrl": self.image_url,
            "title": self.title,
            "price": self.price,
        }
        if self.status is not None:
            payload["status"] = self.status.value
        if self.pair_price is not None:
            payload["pairPrice"] = self.pair_price
        payload["contentType"] = self.content_type
        return payload


def matches_filename_shape(object_name: str) -> bool:
    """Bare filename must be 2-3 letters, 2-3 digits and an extension."""

    filename = object_name.rsplit("/", 1)[-1] or object_name
    return FILENAME_SHAPE.fullmatch(filename) is not None


def has_image_extension(object_name: str, extensions: Iterable[str]) -> bool:
    lowered = object_name.lower()
    return any(lowered.endswith(extension) for extension in extensions)


def select_eligible(
    objects: Iterable[StorageObject], settings: ShopCatalogSettings
) -> List[StorageObject]:
    """Keep well-shaped, non-excluded image objects in listing order."""

    eligible: List[StorageObject] = []
    for item in objects:
        if not matches_filename_shape(item.name):
            LOGGER.debug("Dropping %s: filename shape", item.name)
        elif not has_image_extension(item.name, settings.image_extensions):
            LOGGER.debug("Dropping %s: not an image", item.name)
        elif is_excluded(item.name):
            LOGGER.debug("Dropping %s: excluded shot", item.name)
        else:
            eligible.append(item)
    return eligible


def build_entry(
    item: StorageObject, settings: ShopCatalogSettings, classifier: ProductClassifier
) -> CatalogEntry:
    classification = classifier.classify(item.name)
    price = classification.price
    return CatalogEntry(
        id=item.name,
        filename=item.filename,
        image_url=settings.public_url_for(item.name),
        title=classification.title,
        price=price.display,
        status=price.status,
        pair_price=price.pair_display,
        content_type=item.content_type or DEFAULT_CONTENT_TYPE,
    )


def collation_key(title: str) -> Tuple[str, str]:
    """Case-insensitive ordering with lowercase first among case variants."""

    return (title.casefold(), title.swapcase())


def sort_entries(entries: Iterable[CatalogEntry]) -> List[CatalogEntry]:
    """Priced, sold and inquire items first, then unpriced; each by title."""

    return sorted(entries, key=lambda entry: (not entry.is_priced, collation_key(entry.title)))


class CatalogService:
    """Produce the sorted shop catalog for the configured bucket folder."""

    def __init__(
        self,
        settings: ShopCatalogSettings,
        listing_client: ListingClient,
        *,
        classifier: Optional[ProductClassifier] = None,
    ) -> None:
        self.settings = settings
        self.listing_client = listing_client
        self.classifier = classifier or ProductClassifier(folder_prefix=settings.folder_prefix)

    def assemble(self, objects: Sequence[StorageObject]) -> List[CatalogEntry]:
        """Filter, classify and sort an already fetched listing."""

        eligible = select_eligible(objects, self.settings)
        entries = [build_entry(item, self.settings, self.classifier) for item in eligible]
        LOGGER.info("Catalog built with %s of %s listed objects", len(entries), len(objects))
        return sort_entries(entries)

    async def fetch_catalog(self) -> List[CatalogEntry]:
        """List the folder once and return the catalog entries."""

        objects = await self.listing_client.list_objects()
        try:
            return self.assemble(objects)
        except ShopCatalogError:
            raise
        except Exception as error:
            raise ProcessingFailure(f"Failed to build catalog: {error}") from error

    async def fetch_payload(self) -> Dict[str, List[Dict[str, str]]]:
        """Return the ``{"items": [...]}`` response body."""

        entries = await self.fetch_catalog()
        return {"items": [entry.as_dict() for entry in entries]}
