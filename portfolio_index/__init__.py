"""Build the 3D model portfolio's gallery.json from folders or a CSV sheet."""

from .builder import build_and_write, build_index, normalise_item
from .config import IndexConfig
from .errors import GalleryFormatError, PortfolioIndexError, SourceNotFoundError
from .paths import PathResolver, Resolution
from .sources import CatalogSource, FolderSource, TabularSource
from .tabular import format_records, parse_records
from .verify import verify_gallery

__version__ = "0.1.0"

__all__ = [
    "IndexConfig",
    "PathResolver",
    "Resolution",
    "CatalogSource",
    "FolderSource",
    "TabularSource",
    "build_index",
    "build_and_write",
    "normalise_item",
    "parse_records",
    "format_records",
    "verify_gallery",
    "PortfolioIndexError",
    "SourceNotFoundError",
    "GalleryFormatError",
]
