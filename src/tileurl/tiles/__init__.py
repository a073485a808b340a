"""Tile coordinates, grids, URL functions and template expansion."""

from .coord import TileCoord, hash_tile_coord, modulo
from .grid import TileGrid, TileRange, StaticTileGrid, XYZTileGrid
from .urlfunction import (
    TileUrlFunction,
    TemplateTileUrlFunction,
    ShardedTileUrlFunction,
    TileUrlError,
    InvalidConfigurationError,
    create_from_template,
    create_from_templates,
    create_from_tile_url_functions,
    null_tile_url_function,
)
from .expand import expand_url

__all__ = [
    'TileCoord',
    'hash_tile_coord',
    'modulo',
    'TileGrid',
    'TileRange',
    'StaticTileGrid',
    'XYZTileGrid',
    'TileUrlFunction',
    'TemplateTileUrlFunction',
    'ShardedTileUrlFunction',
    'TileUrlError',
    'InvalidConfigurationError',
    'create_from_template',
    'create_from_templates',
    'create_from_tile_url_functions',
    'null_tile_url_function',
    'expand_url',
]
