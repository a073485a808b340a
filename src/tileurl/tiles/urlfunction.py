"""
Tile URL functions.

A tile URL function maps (tile_coord, pixel_ratio, projection) to a URL, or
to None when no coordinate is given. Everything here produces and consumes
that one shape so functions compose freely:

    create_from_template      one template -> one function
    create_from_tile_url_functions
                              N functions -> one function, sharded by
                              coordinate hash
    create_from_templates     both of the above in one step
    null_tile_url_function    always None

Placeholders:
- {z}   zoom level
- {x}   tile column
- {y}   tile row, top-left origin (stored row y becomes -y - 1)
- {-y}  tile row, bottom-left origin (grid height at z plus stored row);
        needs a grid with a bounded extent at that zoom
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Sequence

from .coord import TileCoord, hash_tile_coord, modulo
from .grid import TileGrid

TileUrlFunction = Callable[[Optional[TileCoord], float, Any], Optional[str]]


class TileUrlError(Exception):
    """Base class for tile URL errors."""
    pass


class InvalidConfigurationError(TileUrlError):
    """Raised when a tile URL function cannot be built or applied as configured."""

    code = 55


@dataclass(frozen=True)
class TemplateTileUrlFunction:
    """A compiled URL template bound to the grid used for {-y}."""
    template: str
    tile_grid: TileGrid | None = field(default=None, hash=False)

    def apply(
        self,
        tile_coord: TileCoord | None,
        pixel_ratio: float = 1.0,
        projection: Any = None
    ) -> str | None:
        """Resolve the template for a tile, or return None without a tile."""
        if tile_coord is None:
            return None

        z, x, y = tile_coord
        url = (
            self.template
            .replace('{z}', str(z))
            .replace('{x}', str(x))
            .replace('{y}', str(-y - 1))
        )
        if '{-y}' in url:
            url = url.replace('{-y}', str(self._full_height(z) + y))
        return url

    __call__ = apply

    def _full_height(self, z: int) -> int:
        tile_range = None
        if self.tile_grid is not None:
            tile_range = self.tile_grid.get_full_tile_range(z)
        if tile_range is None:
            raise InvalidConfigurationError(
                f"The {{-y}} placeholder requires a tile grid with extent "
                f"(no full tile range at zoom {z} for {self.template!r})"
            )
        return tile_range.get_height()


@dataclass(frozen=True)
class ShardedTileUrlFunction:
    """Delegates each tile to one of several equivalent functions."""
    tile_url_functions: tuple[TileUrlFunction, ...]

    def select(self, tile_coord: TileCoord) -> int:
        """Index of the function that serves this tile."""
        return modulo(hash_tile_coord(tile_coord), len(self.tile_url_functions))

    def apply(
        self,
        tile_coord: TileCoord | None,
        pixel_ratio: float = 1.0,
        projection: Any = None
    ) -> str | None:
        if tile_coord is None:
            return None
        tile_url_function = self.tile_url_functions[self.select(tile_coord)]
        return tile_url_function(tile_coord, pixel_ratio, projection)

    __call__ = apply


def create_from_template(template: str, tile_grid: TileGrid | None = None) -> TemplateTileUrlFunction:
    """Compile a single URL template."""
    return TemplateTileUrlFunction(template=template, tile_grid=tile_grid)


def create_from_templates(templates: Sequence[str], tile_grid: TileGrid | None = None) -> TileUrlFunction:
    """Compile several equivalent templates and shard tiles across them."""
    return create_from_tile_url_functions(
        [create_from_template(template, tile_grid) for template in templates]
    )


def create_from_tile_url_functions(tile_url_functions: Sequence[TileUrlFunction]) -> TileUrlFunction:
    """
    Combine tile URL functions into one.

    A single function is returned as is. With more than one, each tile is
    sent to the function at hash(tile_coord) mod N, so a given tile always
    maps to the same endpoint.
    """
    if not tile_url_functions:
        raise InvalidConfigurationError("At least one tile URL function is required")
    if len(tile_url_functions) == 1:
        return tile_url_functions[0]
    return ShardedTileUrlFunction(tuple(tile_url_functions))


def null_tile_url_function(
    tile_coord: TileCoord | None,
    pixel_ratio: float = 1.0,
    projection: Any = None
) -> str | None:
    return None
