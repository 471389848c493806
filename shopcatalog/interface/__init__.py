"""Mini README: HTTP interface for the shop catalog.

Exports the FastAPI application factory serving the catalog endpoint.
"""

from .web_app import create_application

__all__ = ["create_application"]
