"""Schema loader -- locate, fetch, decode, scan and transform documents.

This sub-package turns a root API description into a complete schema map:

    from specload.parser import load_sync

    schemas = load_sync("https://example.com/openapi.json")

Sub-modules, leaves first:

* :mod:`~specload.parser.locator` -- canonical locations and relative
  resolution.
* :mod:`~specload.parser.fetcher` -- file reads and HTTP requests.
* :mod:`~specload.parser.decoder` -- JSON/YAML decoding with fallback.
* :mod:`~specload.parser.refs` -- ``$ref`` parsing and tree rewriting.
* :mod:`~specload.parser.scanner` -- recursive, concurrent document discovery.
* :mod:`~specload.parser.transformer` -- final namespacing of pointers.
* :mod:`~specload.parser.loader` -- the public :func:`load` entry points.
"""

from specload.parser.loader import load, load_sync
from specload.parser.locator import resolve_location

__all__ = ["load", "load_sync", "resolve_location"]
