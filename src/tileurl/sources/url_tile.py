"""
Tile sources configured by URL.

A source holds the tile URL function currently in use. Setting a url expands
any {a-c} / {1-4} range in it and shards tiles across the resulting
templates; setting urls shards across the given list as is.
"""

from typing import Any, Sequence

from ..tiles.coord import TileCoord
from ..tiles.expand import expand_url
from ..tiles.grid import TileGrid
from ..tiles.urlfunction import (
    TileUrlError,
    TileUrlFunction,
    create_from_templates,
    null_tile_url_function,
)


class SourceConfigError(TileUrlError):
    """Raised when a tile source configuration is invalid."""
    pass


class UrlTileSource:
    """A tile source whose tile URLs come from templates or a custom function."""

    def __init__(
        self,
        tile_grid: TileGrid | None = None,
        url: str | None = None,
        urls: Sequence[str] | None = None,
        tile_url_function: TileUrlFunction | None = None
    ):
        if url is not None and urls is not None:
            raise SourceConfigError("Specify either url or urls, not both")

        self.tile_grid = tile_grid
        self.urls: list[str] | None = None
        self.tile_url_function: TileUrlFunction = null_tile_url_function

        if tile_url_function is not None:
            self.set_tile_url_function(tile_url_function)
        elif urls is not None:
            self.set_urls(urls)
        elif url is not None:
            self.set_url(url)

    def set_url(self, url: str) -> None:
        """Use a single URL template, expanding any range it contains."""
        self.set_urls(expand_url(url))

    def set_urls(self, urls: Sequence[str]) -> None:
        """Use a list of equivalent URL templates."""
        urls = list(urls)
        if not urls:
            raise SourceConfigError("urls must contain at least one template")
        self.tile_url_function = create_from_templates(urls, self.tile_grid)
        self.urls = urls

    def set_tile_url_function(self, tile_url_function: TileUrlFunction) -> None:
        """Use a custom tile URL function. Templates are forgotten."""
        self.tile_url_function = tile_url_function
        self.urls = None

    def get_urls(self) -> list[str] | None:
        return self.urls

    def get_tile_url_function(self) -> TileUrlFunction:
        return self.tile_url_function

    def tile_url(
        self,
        tile_coord: TileCoord | None,
        pixel_ratio: float = 1.0,
        projection: Any = None
    ) -> str | None:
        """Resolve the URL for a tile with the current function."""
        return self.tile_url_function(tile_coord, pixel_ratio, projection)
