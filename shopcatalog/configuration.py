"""Mini README: Centralised configuration for the shop catalog service.

Structure:
    * ShopCatalogSettings - immutable Pydantic model of the bucket, folder and
      HTTP options the catalog endpoint depends on.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Production code calls ``get_settings`` once and hands the instance to the
    application factory. Tests build ``ShopCatalogSettings(...)`` directly and
    pass it in, which keeps the cached global untouched. Every field can be
    overridden with a ``SHOPCATALOG_`` prefixed environment variable; list
    values such as ``SHOPCATALOG_IMAGE_EXTENSIONS`` take comma separated text.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Optional, Tuple

from pydantic import Field, validator
from pydantic_settings import BaseSettings, NoDecode

DEFAULT_IMAGE_EXTENSIONS: Tuple[str, ...] = (".jpg", ".jpeg", ".png", ".gif", ".webp")


class ShopCatalogSettings(BaseSettings):
    """Runtime configuration for the shop catalog endpoint."""

    log_level: str = Field(
        "INFO",
        description="Root logging level name applied when the service starts.",
    )
    bucket_name: str = Field(
        "autopot1-printdump",
        description="Object-storage bucket holding the product photos.",
    )
    folder_prefix: str = Field(
        "completed_works/",
        description="Folder inside the bucket that is listed for shop items.",
    )
    storage_api_root: str = Field(
        "https://storage.googleapis.com/storage/v1/b",
        description="Base of the JSON listing API; the bucket and '/o' are appended.",
    )
    public_base_url: str = Field(
        "https://storage.googleapis.com",
        description="Public host used to build image URLs for each object.",
    )
    # Env values are comma separated (".jpg,.png"), not JSON.
    image_extensions: Annotated[Tuple[str, ...], NoDecode] = Field(
        DEFAULT_IMAGE_EXTENSIONS,
        description="File extensions accepted as product images (case-insensitive).",
    )
    cache_max_age: int = Field(
        3600,
        description="Seconds a shared cache may keep a successful catalog response.",
        ge=0,
    )
    request_timeout: Optional[float] = Field(
        None,
        description=(
            "Timeout in seconds for the storage listing call. Unset leaves the"
            " hosting environment's request timeout in charge."
        ),
        gt=0,
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the HTTP service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the HTTP service exposes.",
        ge=1,
        le=65535,
    )

    class Config:
        env_prefix = "SHOPCATALOG_"
        env_file = ".env"
        case_sensitive = False
        frozen = True

    @validator("folder_prefix")
    def _ensure_trailing_slash(cls, value: str) -> str:
        """Folder prefixes always end with the listing delimiter."""

        value = value.lstrip("/")
        if value and not value.endswith("/"):
            value = f"{value}/"
        return value

    @validator("storage_api_root", "public_base_url")
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @validator("image_extensions", pre=True)
    def _normalise_extensions(cls, value: object) -> Tuple[str, ...]:
        """Lowercase extensions and make sure each starts with a dot."""

        if isinstance(value, str):
            value = [part for part in value.split(",")]
        extensions = []
        for extension in value:  # type: ignore[union-attr]
            extension = str(extension).strip().lower()
            if not extension:
                continue
            if not extension.startswith("."):
                extension = f".{extension}"
            extensions.append(extension)
        if not extensions:
            raise ValueError("At least one image extension must be configured")
        return tuple(extensions)

    @property
    def listing_url(self) -> str:
        """Endpoint that enumerates the objects of the configured bucket."""

        return f"{self.storage_api_root}/{self.bucket_name}/o"

    def public_url_for(self, object_name: str) -> str:
        """Return the public download URL of an object in the bucket."""

        return f"{self.public_base_url}/{self.bucket_name}/{object_name}"


@lru_cache()
def get_settings() -> ShopCatalogSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return ShopCatalogSettings()
