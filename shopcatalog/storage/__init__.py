"""Mini README: Remote object-storage access for the shop catalog.

Exports the listing client and the immutable object snapshot it returns.
Swap the client for a stub exposing ``list_objects`` to run the catalog
without network access.
"""

from .listing_client import StorageListingClient, StorageObject

__all__ = ["StorageListingClient", "StorageObject"]
