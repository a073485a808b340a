"""
Command-line interface for tileurl.

Commands:
- expand: Expand a {a-c} / {1-4} range in a URL template
- resolve: Resolve the URL for one tile
- shard: Show how tiles at a zoom level are spread across endpoints
- sources: Resolve one tile against every source in a definition file
"""

from collections import Counter
from itertools import islice
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .tiles.coord import TileCoord
from .tiles.expand import expand_url
from .tiles.grid import XYZTileGrid
from .tiles.urlfunction import (
    InvalidConfigurationError,
    ShardedTileUrlFunction,
    TileUrlFunction,
    create_from_templates,
)
from .sources.config import load_sources
from .sources.url_tile import SourceConfigError

console = Console()


def _tile_coord(grid: XYZTileGrid, z: int, x: int, row: int, tms: bool) -> TileCoord:
    """Convert a command-line row into a stored coordinate."""
    if not tms:
        return TileCoord.from_xyz(z, x, row)
    tile_range = grid.get_full_tile_range(z)
    if tile_range is None:
        console.print(f"[red]✗ Zoom {z} is outside the grid (max {grid.max_zoom})[/]")
        raise click.Abort()
    return TileCoord(z, x, row - tile_range.get_height())


def _compile(url: str, grid: XYZTileGrid) -> tuple[list[str], TileUrlFunction]:
    """Expand a URL and build its tile URL function, aborting on empty ranges."""
    templates = expand_url(url)
    if not templates:
        console.print(f"[red]✗ {escape(url)} expands to no templates[/]", highlight=False)
        raise click.Abort()
    return templates, create_from_templates(templates, grid)


def _endpoint(tile_url_function, coord: TileCoord) -> int:
    """Index of the template serving a tile, 0 when there is only one."""
    if isinstance(tile_url_function, ShardedTileUrlFunction):
        return tile_url_function.select(coord)
    return 0


@click.group()
def main():
    """tileurl - Resolve tile coordinates into tile service URLs."""
    pass


@main.command()
@click.argument('url')
def expand(url: str):
    """Expand the first {a-c} or {1-4} range in URL."""
    for template in expand_url(url):
        console.print(template, markup=False, highlight=False, soft_wrap=True)


@main.command()
@click.argument('url')
@click.argument('z', type=click.IntRange(min=0))
@click.argument('x', type=int)
@click.argument('row', type=int)
@click.option('--tms', is_flag=True, help='ROW counts from the bottom of the grid')
@click.option('--max-zoom', type=int, default=22, show_default=True,
              help='Deepest zoom level of the grid used for {-y}')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output')
def resolve(url: str, z: int, x: int, row: int, tms: bool, max_zoom: int, verbose: bool):
    """Resolve the URL of tile Z/X/ROW.

    URL may contain {z}, {x}, {y} and {-y} placeholders and one
    {a-c} or {1-4} range. ROW is a top-left origin row unless --tms
    is given.
    """
    grid = XYZTileGrid(max_zoom=max_zoom)
    templates, tile_url_function = _compile(url, grid)
    tile_coord = _tile_coord(grid, z, x, row, tms)

    try:
        resolved = tile_url_function(tile_coord, 1.0, None)
    except InvalidConfigurationError as e:
        console.print(f"[red]✗ {escape(str(e))}[/]", highlight=False)
        raise click.Abort()

    if verbose:
        console.print(f"[dim]Templates: {len(templates)}[/]")
        if isinstance(tile_url_function, ShardedTileUrlFunction):
            console.print(f"[dim]Endpoint: {tile_url_function.select(tile_coord)}[/]")
    console.print(resolved, markup=False, highlight=False, soft_wrap=True)


@main.command()
@click.argument('url')
@click.option('-z', '--zoom', type=click.IntRange(0, 30), required=True, help='Zoom level to inspect')
@click.option('--limit', type=click.IntRange(min=0), default=16, show_default=True,
              help='Number of tiles to list')
def shard(url: str, zoom: int, limit: int):
    """Show which endpoint serves each tile at a zoom level."""
    templates, tile_url_function = _compile(url, XYZTileGrid())

    n = 1 << zoom
    coords = (TileCoord.from_xyz(zoom, x, row) for row in range(n) for x in range(n))

    table = Table(title=f"Endpoints at z{zoom}")
    table.add_column("Tile", style="cyan")
    table.add_column("Endpoint", justify="right")
    table.add_column("URL", overflow="fold")

    for coord in islice(coords, limit):
        index = _endpoint(tile_url_function, coord)
        try:
            resolved = tile_url_function(coord, 1.0, None)
        except InvalidConfigurationError as e:
            console.print(f"[red]✗ {escape(str(e))}[/]", highlight=False)
            raise click.Abort()
        table.add_row(f"{coord.z}/{coord.x}/{coord.xyz_row}", str(index), Text(resolved))

    console.print(table)
    console.print()

    # Totals over the whole zoom level when it is small enough to enumerate
    if n * n <= 65536:
        counts = Counter(
            _endpoint(tile_url_function, TileCoord.from_xyz(zoom, x, row))
            for row in range(n) for x in range(n)
        )
        console.print(f"[bold]Distribution over {n * n} tiles:[/]")
        for index, template in enumerate(templates):
            console.print(f"  {index}: {counts.get(index, 0)}  [dim]{escape(template)}[/]", highlight=False)


@main.command()
@click.argument('config_file', type=click.Path(exists=True, path_type=Path))
@click.argument('z', type=click.IntRange(min=0))
@click.argument('x', type=int)
@click.argument('row', type=int)
def sources(config_file: Path, z: int, x: int, row: int):
    """Resolve tile Z/X/ROW against every source in CONFIG_FILE."""
    try:
        definitions = load_sources(config_file)
    except SourceConfigError as e:
        console.print(f"[red]✗ Failed to load sources: {escape(str(e))}[/]", highlight=False)
        raise click.Abort()

    tile_coord = TileCoord.from_xyz(z, x, row)

    table = Table(title=f"Tile {z}/{x}/{row}")
    table.add_column("Source", style="cyan")
    table.add_column("Endpoints", justify="right")
    table.add_column("URL", overflow="fold")

    for definition in definitions:
        urls = definition.source.get_urls() or []
        try:
            resolved = Text(definition.source.tile_url(tile_coord) or '')
        except InvalidConfigurationError as e:
            resolved = Text(str(e), style="red")
        table.add_row(definition.name, str(len(urls)), resolved)

    console.print(table)


if __name__ == '__main__':
    main()
