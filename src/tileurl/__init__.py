"""
tileurl - Resolve tile coordinates into URLs for tiled map services.

Usage:
    from tileurl import TileCoord, create_from_templates, expand_url

    tile_url = create_from_templates(expand_url("https://{a-c}.tile.example/{z}/{x}/{y}.png"))
    url = tile_url(TileCoord.from_xyz(3, 4, 2), 1.0, None)
"""

__version__ = "0.1.0"

# Public API exports
from .tiles import (
    TileCoord,
    hash_tile_coord,
    modulo,
    TileRange,
    StaticTileGrid,
    XYZTileGrid,
    TemplateTileUrlFunction,
    ShardedTileUrlFunction,
    create_from_template,
    create_from_templates,
    create_from_tile_url_functions,
    null_tile_url_function,
    expand_url,
    TileUrlError,
    InvalidConfigurationError,
)

from .sources import UrlTileSource, SourceConfigError, load_sources, parse_sources

__all__ = [
    # Version
    "__version__",
    # Coordinates and grids
    "TileCoord",
    "hash_tile_coord",
    "modulo",
    "TileRange",
    "StaticTileGrid",
    "XYZTileGrid",
    # URL functions
    "TemplateTileUrlFunction",
    "ShardedTileUrlFunction",
    "create_from_template",
    "create_from_templates",
    "create_from_tile_url_functions",
    "null_tile_url_function",
    "expand_url",
    # Sources
    "UrlTileSource",
    "load_sources",
    "parse_sources",
    # Exceptions
    "TileUrlError",
    "InvalidConfigurationError",
    "SourceConfigError",
]
