"""
Tile grid query interface.

URL resolution only ever asks a grid one question: the full tile range at a
zoom level. Grids without a bounded extent answer None.
"""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class TileRange:
    """Inclusive range of tile columns and rows."""
    min_x: int
    max_x: int
    min_y: int
    max_y: int

    def get_width(self) -> int:
        return self.max_x - self.min_x + 1

    def get_height(self) -> int:
        return self.max_y - self.min_y + 1


class TileGrid(Protocol):
    """Anything that can report the full tile range for a zoom level."""

    def get_full_tile_range(self, z: int) -> TileRange | None:
        ...


@dataclass(frozen=True, eq=False)
class StaticTileGrid:
    """A grid whose full ranges are listed explicitly per zoom."""
    ranges: dict[int, TileRange] = field(default_factory=dict)

    @classmethod
    def from_heights(cls, heights: dict[int, int]) -> "StaticTileGrid":
        """Build square ranges from a zoom -> height mapping."""
        return cls({
            z: TileRange(0, height - 1, -height, -1)
            for z, height in heights.items()
        })

    def get_full_tile_range(self, z: int) -> TileRange | None:
        return self.ranges.get(z)


@dataclass(frozen=True)
class XYZTileGrid:
    """The global square pyramid used by web mercator XYZ services."""
    min_zoom: int = 0
    max_zoom: int = 22

    def get_full_tile_range(self, z: int) -> TileRange | None:
        if z < self.min_zoom or z > self.max_zoom:
            return None
        n = 1 << z
        return TileRange(0, n - 1, -n, -1)
