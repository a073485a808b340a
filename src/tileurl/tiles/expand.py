"""
Expand bracketed ranges in URL templates.

    http://{a-c}.tile.example/{z}/{x}/{y}.png
        -> http://a.tile.example/..., http://b.tile.example/..., http://c...

Letter ranges are checked before number ranges and only the first range
found is expanded.
"""

import re

CHAR_RANGE_PATTERN = re.compile(r'\{([a-z])-([a-z])\}')
NUMBER_RANGE_PATTERN = re.compile(r'\{(\d+)-(\d+)\}')


def expand_url(url: str) -> list[str]:
    """Expand the first {a-c} or {1-4} range in a URL into one URL per value."""
    match = CHAR_RANGE_PATTERN.search(url)
    if match:
        start, stop = (ord(c) for c in match.groups())
        return [url.replace(match.group(0), chr(code), 1) for code in range(start, stop + 1)]

    match = NUMBER_RANGE_PATTERN.search(url)
    if match:
        start, stop = (int(n) for n in match.groups())
        return [url.replace(match.group(0), str(i), 1) for i in range(start, stop + 1)]

    return [url]
