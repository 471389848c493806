"""Mini README: Tests for the catalog HTTP endpoint.

Exercises the FastAPI application with a stub listing client and with the
real client over a mocked transport, checking the success body, caching
headers and the structured failure response.
"""

from __future__ import annotations

import httpx
from fastapi.testclient import TestClient

from conftest import StubListingClient
from shopcatalog.errors import UpstreamFailure
from shopcatalog.interface import create_application
from shopcatalog.interface.web_app import SHOP_ITEMS_PATH
from shopcatalog.storage import StorageListingClient


def test_shop_items_returns_sorted_catalog(settings, sample_objects) -> None:
    client = TestClient(create_application(settings, StubListingClient(sample_objects)))

    response = client.get(SHOP_ITEMS_PATH)

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.headers["cache-control"] == "public, max-age=3600"
    items = response.json()["items"]
    assert [item["filename"] for item in items] == ["SM12.jpg", "SV03.png", "TT07.JPG", "XX99.jpg"]
    assert "status" not in items[0]
    assert items[1]["status"] == "inquire"
    assert items[2] == {
        "id": "completed_works/TT07.JPG",
        "filename": "TT07.JPG",
        "imageUrl": "https://storage.googleapis.com/autopot1-printdump/completed_works/TT07.JPG",
        "title": "Tumbly Tumbler 07",
        "price": "Sold",
        "status": "sold",
        "contentType": "image/jpeg",
    }
    assert items[3]["title"] == "Xx99"
    assert items[3]["price"] == "Not Priced"


def test_empty_folder_returns_empty_items(settings) -> None:
    client = TestClient(create_application(settings, StubListingClient()))
    response = client.get(SHOP_ITEMS_PATH)
    assert response.status_code == 200
    assert response.json() == {"items": []}


def test_upstream_failure_returns_structured_500(settings) -> None:
    stub = StubListingClient(error=UpstreamFailure("Failed to fetch from storage: Forbidden"))
    client = TestClient(create_application(settings, stub))

    response = client.get(SHOP_ITEMS_PATH)

    assert response.status_code == 500
    body = response.json()
    assert body == {
        "error": "Failed to fetch shop items",
        "details": "Failed to fetch from storage: Forbidden",
    }
    assert "items" not in body
    assert "cache-control" not in response.headers


def test_unexpected_error_without_message_reports_unknown(settings) -> None:
    client = TestClient(create_application(settings, StubListingClient(error=RuntimeError())))
    response = client.get(SHOP_ITEMS_PATH)
    assert response.status_code == 500
    assert response.json()["details"] == "Unknown error"


def test_end_to_end_with_mocked_storage(settings) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.params.get("delimiter") != "/":
            return httpx.Response(400)
        return httpx.Response(
            200,
            json={
                "items": [
                    {"name": "completed_works/RV04.jpg", "contentType": "image/jpeg"},
                    {"name": "completed_works/TM03.webp", "contentType": "image/webp"},
                    {"name": "completed_works/README.md", "contentType": "text/markdown"},
                ]
            },
        )

    listing_client = StorageListingClient(settings, transport=httpx.MockTransport(handler))
    client = TestClient(create_application(settings, listing_client))

    items = client.get(SHOP_ITEMS_PATH).json()["items"]

    assert [(item["title"], item["price"]) for item in items] == [
        ("Martini Tumbler 03", "$40"),
        ("Random Vase 04", "Sold"),
    ]
    assert items[0]["pairPrice"] == "$70"
    assert items[0]["contentType"] == "image/webp"


def test_end_to_end_upstream_error_status(settings) -> None:
    listing_client = StorageListingClient(
        settings, transport=httpx.MockTransport(lambda request: httpx.Response(503))
    )
    client = TestClient(create_application(settings, listing_client))

    response = client.get(SHOP_ITEMS_PATH)

    assert response.status_code == 500
    assert response.json() == {
        "error": "Failed to fetch shop items",
        "details": "Failed to fetch from storage: Service Unavailable",
    }
