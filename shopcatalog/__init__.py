"""Mini README: Core package initializer for the shop catalog service.

The package turns a folder of product photos in a cloud storage bucket into
a priced, sorted JSON catalog. Only the logging helper is re-exported here so
importing the package stays cheap; the web framework is pulled in by
``shopcatalog.interface`` alone.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
