"""URL-configured tile sources and their definition files."""

from .url_tile import UrlTileSource, SourceConfigError
from .config import SourceConfigParser, SourceDefinition, load_sources, parse_sources

__all__ = [
    'UrlTileSource',
    'SourceConfigError',
    'SourceConfigParser',
    'SourceDefinition',
    'load_sources',
    'parse_sources',
]
