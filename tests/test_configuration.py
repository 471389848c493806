"""Mini README: Tests for settings validation and URL helpers."""

from __future__ import annotations

import pytest

from shopcatalog.configuration import ShopCatalogSettings


def test_defaults_point_at_public_bucket() -> None:
    settings = ShopCatalogSettings()
    assert settings.listing_url == "https://storage.googleapis.com/storage/v1/b/autopot1-printdump/o"
    assert settings.public_url_for("completed_works/SM12.jpg") == (
        "https://storage.googleapis.com/autopot1-printdump/completed_works/SM12.jpg"
    )
    assert settings.image_extensions == (".jpg", ".jpeg", ".png", ".gif", ".webp")
    assert settings.cache_max_age == 3600


def test_folder_prefix_gains_trailing_slash() -> None:
    assert ShopCatalogSettings(folder_prefix="/shop").folder_prefix == "shop/"


def test_extensions_are_normalised() -> None:
    settings = ShopCatalogSettings(image_extensions=["JPG", ".PNG ", ""])
    assert settings.image_extensions == (".jpg", ".png")


def test_empty_extension_list_is_rejected() -> None:
    with pytest.raises(ValueError):
        ShopCatalogSettings(image_extensions=[])


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("SHOPCATALOG_BUCKET_NAME", "staging-prints")
    monkeypatch.setenv("SHOPCATALOG_CACHE_MAX_AGE", "60")
    settings = ShopCatalogSettings()
    assert settings.bucket_name == "staging-prints"
    assert settings.cache_max_age == 60


def test_settings_are_immutable() -> None:
    settings = ShopCatalogSettings()
    with pytest.raises(ValueError):
        settings.bucket_name = "other"


def test_extensions_from_environment_are_comma_separated(monkeypatch) -> None:
    monkeypatch.setenv("SHOPCATALOG_IMAGE_EXTENSIONS", ".jpg,PNG")
    assert ShopCatalogSettings().image_extensions == (".jpg", ".png")


def test_settings_have_no_environment_label() -> None:
    assert "environment" not in ShopCatalogSettings.model_fields
