"""Mini README: Entry point CLI for the shop catalog service.

This script exposes a Typer CLI that starts the FastAPI application, prints
the live catalog once, or shows how individual filenames are classified.
Settings come from ``SHOPCATALOG_`` environment variables when available.
"""

from __future__ import annotations

import asyncio
import json
from typing import List

import typer
import uvicorn

from shopcatalog.catalog import CatalogService
from shopcatalog.classification import ProductClassifier
from shopcatalog.configuration import get_settings
from shopcatalog.errors import ShopCatalogError
from shopcatalog.logging_utils import configure_root_logger
from shopcatalog.storage import StorageListingClient

cli = typer.Typer(help="Serve and inspect the shop catalog.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # 0.0.0.0 is not a browsable address.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting shop catalog on {effective_host}:{effective_port}.\n"
        f"Catalog available at http://{browser_host}:{effective_port}/api/shop-items.json"
    )
    uvicorn.run(
        "shopcatalog.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def items() -> None:
    """Fetch the catalog once and print the JSON body."""

    settings = get_settings()
    configure_root_logger(settings.log_level)
    service = CatalogService(settings, StorageListingClient(settings))
    try:
        payload = asyncio.run(service.fetch_payload())
    except ShopCatalogError as error:
        typer.echo(f"Failed to fetch shop items: {error}", err=True)
        raise typer.Exit(code=1) from error
    typer.echo(json.dumps(payload, indent=2))


@cli.command()
def classify(filenames: List[str] = typer.Argument(..., help="Filenames to classify.")) -> None:
    """Print the title and price derived for each filename."""

    classifier = ProductClassifier(folder_prefix=get_settings().folder_prefix)
    for filename in filenames:
        result = classifier.classify(filename)
        typer.echo(json.dumps({"filename": filename, **result.as_dict()}))


@cli.command()
def rules() -> None:
    """List the classification rules in evaluation order."""

    for position, (friendly_name, pattern) in enumerate(ProductClassifier().describe_rules(), 1):
        typer.echo(f"{position:2d}. {friendly_name:<16} {pattern}")


if __name__ == "__main__":
    cli()
