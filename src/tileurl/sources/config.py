"""
Tile source definition files.

Supports two input formats:
1. JSON file (.json)
2. Gzipped JSON (.json.gz)

Layout:
    {
      "sources": [
        {"name": "osm", "url": "https://{a-c}.tile.example.org/{z}/{x}/{y}.png"},
        {"name": "tms", "urls": ["https://t1.example/{z}/{x}/{-y}.png",
                                 "https://t2.example/{z}/{x}/{-y}.png"],
         "grid": {"type": "xyz", "max_zoom": 18}}
      ]
    }

Grids are {"type": "xyz", "min_zoom": 0, "max_zoom": 22} or
{"type": "static", "heights": {"0": 1, "1": 2}}.
"""

from dataclasses import dataclass
from pathlib import Path
import gzip
import json

from ..tiles.grid import StaticTileGrid, TileGrid, XYZTileGrid
from .url_tile import SourceConfigError, UrlTileSource


@dataclass
class SourceDefinition:
    """A named tile source loaded from a definition file."""
    name: str
    source: UrlTileSource
    grid_type: str | None = None  # xyz, static


class SourceConfigParser:
    """Parse tile source definitions from files or dictionaries."""

    def parse(self, path: Path) -> list[SourceDefinition]:
        """Parse a definition file, gzipped or not."""
        path = Path(path)
        try:
            if path.suffix == '.gz':
                with gzip.open(path, 'rt', encoding='utf-8') as f:
                    data = json.load(f)
            else:
                with open(path, 'r', encoding='utf-8') as f:
                    data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SourceConfigError(f"Invalid JSON in {path}: {e}") from e
        except OSError as e:
            raise SourceConfigError(f"Cannot read {path}: {e}") from e

        return self.parse_data(data)

    def parse_data(self, data: dict) -> list[SourceDefinition]:
        """Parse definitions from an already loaded document."""
        if not isinstance(data, dict) or 'sources' not in data:
            raise SourceConfigError("Missing required field: sources")
        if not isinstance(data['sources'], list):
            raise SourceConfigError("Field sources must be a list")

        definitions = []
        seen = set()
        for index, entry in enumerate(data['sources']):
            definition = self._parse_source(entry, index)
            if definition.name in seen:
                raise SourceConfigError(f"Duplicate source name: {definition.name}")
            seen.add(definition.name)
            definitions.append(definition)

        return definitions

    def _parse_source(self, data: dict, index: int) -> SourceDefinition:
        """Parse one entry of the sources list."""
        if not isinstance(data, dict):
            raise SourceConfigError(f"sources[{index}] must be an object")
        if 'name' not in data:
            raise SourceConfigError(f"Missing required field: sources[{index}].name")
        if not isinstance(data['name'], str):
            raise SourceConfigError(f"sources[{index}].name must be a string")

        name = data['name']
        url = data.get('url')
        urls = data.get('urls')
        if url is None and urls is None:
            raise SourceConfigError(f"Source {name} needs a url or urls")
        if urls is not None and (
            not isinstance(urls, list) or not all(isinstance(u, str) for u in urls)
        ):
            raise SourceConfigError(f"Source {name}: urls must be a list of strings")
        if url is not None and not isinstance(url, str):
            raise SourceConfigError(f"Source {name}: url must be a string")

        grid_data = data.get('grid')
        grid = self._parse_grid(grid_data, name) if grid_data is not None else None

        try:
            source = UrlTileSource(tile_grid=grid, url=url, urls=urls)
        except SourceConfigError as e:
            raise SourceConfigError(f"Source {name}: {e}") from e

        return SourceDefinition(
            name=name,
            source=source,
            grid_type=grid_data.get('type') if grid_data is not None else None
        )

    def _parse_grid(self, data: dict, name: str) -> TileGrid:
        """Parse a grid section."""
        grid_type = data.get('type') if isinstance(data, dict) else None

        if grid_type == 'xyz':
            try:
                return XYZTileGrid(
                    min_zoom=int(data.get('min_zoom', 0)),
                    max_zoom=int(data.get('max_zoom', 22))
                )
            except (TypeError, ValueError) as e:
                raise SourceConfigError(f"Source {name}: invalid grid zoom range") from e
        elif grid_type == 'static':
            heights = data.get('heights')
            if not isinstance(heights, dict):
                raise SourceConfigError(f"Source {name}: static grid needs heights")
            try:
                return StaticTileGrid.from_heights({
                    int(z): int(height) for z, height in heights.items()
                })
            except (TypeError, ValueError) as e:
                raise SourceConfigError(f"Source {name}: invalid grid heights") from e
        else:
            raise SourceConfigError(f"Source {name}: unknown grid type: {grid_type}")


def load_sources(path: Path) -> list[SourceDefinition]:
    """Load tile source definitions from a JSON file."""
    return SourceConfigParser().parse(path)


def parse_sources(data: dict) -> list[SourceDefinition]:
    """Parse tile source definitions from a dictionary."""
    return SourceConfigParser().parse_data(data)
