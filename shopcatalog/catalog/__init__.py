"""Mini README: Catalog assembly for the shop endpoint.

Exports the service that turns one storage listing into sorted catalog
entries, along with the pure filter and sort helpers it is built from.
"""

from .listing import (
    CatalogEntry,
    CatalogService,
    build_entry,
    has_image_extension,
    matches_filename_shape,
    select_eligible,
    sort_entries,
)

__all__ = [
    "CatalogEntry",
    "CatalogService",
    "build_entry",
    "has_image_extension",
    "matches_filename_shape",
    "select_eligible",
    "sort_entries",
]
