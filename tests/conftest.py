"""Mini README: Shared fixtures for the shop catalog tests.

Provides explicit settings and an in-memory listing client so tests never
reach the network or the cached global configuration.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import pytest

from shopcatalog.configuration import ShopCatalogSettings
from shopcatalog.storage import StorageObject


class StubListingClient:
    """Return a fixed listing, or raise ``error`` when one is given."""

    def __init__(
        self, objects: Sequence[StorageObject] = (), error: Optional[Exception] = None
    ) -> None:
        self.objects = list(objects)
        self.error = error
        self.calls = 0

    async def list_objects(self) -> List[StorageObject]:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return list(self.objects)


def make_objects(*names: str) -> List[StorageObject]:
    return [StorageObject(name=name, bucket="autopot1-printdump") for name in names]


@pytest.fixture
def settings() -> ShopCatalogSettings:
    return ShopCatalogSettings(
        bucket_name="autopot1-printdump",
        folder_prefix="completed_works/",
        cache_max_age=3600,
    )


@pytest.fixture
def sample_objects() -> List[StorageObject]:
    return make_objects(
        "completed_works/",
        "completed_works/XX99.jpg",
        "completed_works/TT07.JPG",
        "completed_works/SM12.jpg",
        "completed_works/SV03.png",
        "completed_works/notes.txt",
        "completed_works/AB1234.jpg",
        "completed_works/SV05.tiff",
        "completed_works/TT08_spin.jpg",
        "HANDHELD/AB12.jpg",
    )
