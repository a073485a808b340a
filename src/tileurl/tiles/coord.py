"""
Tile coordinates and the coordinate hash.

Key requirements:
- Coordinates are immutable (z, x, y) triples
- Rows are stored negative-down: row -1 is the topmost tile at a zoom
- The hash is deterministic across processes (never Python's salted hash())
"""

from dataclasses import dataclass
from typing import Iterator, Sequence


@dataclass(frozen=True)
class TileCoord:
    """A single tile's coordinates, row stored negative-down."""
    z: int
    x: int
    y: int

    @classmethod
    def from_xyz(cls, z: int, x: int, row: int) -> "TileCoord":
        """Build a coordinate from a standard top-left origin XYZ row."""
        return cls(z=z, x=x, y=-row - 1)

    @property
    def xyz_row(self) -> int:
        """Row in the top-left origin convention used by most tile servers."""
        return -self.y - 1

    def __iter__(self) -> Iterator[int]:
        return iter((self.z, self.x, self.y))

    def __hash__(self):
        return hash_tile_coord(self)


def hash_tile_coord(tile_coord: Sequence[int]) -> int:
    """
    Combine z, x and y into a single integer.

    Accepts a TileCoord or any (z, x, y) sequence. The result can be
    negative since stored rows usually are.
    """
    z, x, y = tile_coord
    return (x << z) + y


def modulo(a: int, b: int) -> int:
    """Floored remainder of a / b, always in [0, b) for b > 0."""
    return a % b
