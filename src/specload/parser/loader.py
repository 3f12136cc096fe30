"""Public entry points: load a root schema and everything it references.

The two public functions are:

* :func:`load` -- coroutine; use inside an existing event loop.
* :func:`load_sync` -- blocking wrapper around :func:`load` via
  :func:`asyncio.run`.

Both accept a URL, a filesystem path, a :class:`~specload.models.Location`,
or an already-decoded document, and return the final schema map: the root
document under its absolute location id, every other document under its
root-relative id, and every ``$ref`` rewritten to its namespaced form.
"""

from __future__ import annotations

import asyncio
from typing import Optional, Union

import httpx

from specload import output
from specload.config import resolve_load_options
from specload.models import Document, LoadOptions, Location, SchemaMap
from specload.parser.context import LoadContext
from specload.parser.locator import resolve_location, virtual_location
from specload.parser.scanner import scan

Source = Union[str, Location, dict[str, Document], list[Document]]


def _resolve_source(source: Source) -> tuple[Union[Location, Document], Location]:
    """Return ``(scan_source, root_location)`` for a caller-supplied source."""
    if isinstance(source, Location):
        return source, source
    if isinstance(source, str):
        location = resolve_location(source)
        return location, location
    return source, virtual_location()


def _resolve_root(root_url: Union[Location, str, None], default: Location) -> Location:
    if root_url is None:
        return default
    if isinstance(root_url, Location):
        return root_url
    return resolve_location(root_url)


def create_client(options: LoadOptions) -> httpx.AsyncClient:
    """Build the HTTP client used for remote fetches from ``options.request``.

    Connection-level retries are delegated to the httpx transport; the loader
    itself never retries.
    """
    config = options.request
    transport = httpx.AsyncHTTPTransport(
        retries=config.max_retries,
        verify=config.verify_ssl,
    )
    return httpx.AsyncClient(
        transport=transport,
        timeout=config.timeout,
        follow_redirects=config.follow_redirects,
    )


async def load(
    source: Source,
    options: Optional[LoadOptions] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
) -> SchemaMap:
    """Load *source* and every document it references.

    Args:
        source: A URL (http/https), a filesystem path, a
            :class:`~specload.models.Location`, or an in-memory document.
        options: Load options. ``root_url`` defaults to the location of
            *source* (the virtual location for in-memory documents).
            ``SPECLOAD_*`` environment variables are layered on top (see
            :func:`~specload.config.resolve_load_options`).
        client: Optional HTTP client. When omitted one is created from
            ``options.request`` and closed afterwards; an injected client is
            left open.

    Returns:
        The final schema map.

    Raises:
        SpecloadError: Any failure aborts the whole load; no partial map is
            returned.
        ConfigError: If a ``SPECLOAD_*`` environment variable is invalid.

    Example::

        schemas = await load("specs/openapi.yaml")
        root = schemas[resolve_location("specs/openapi.yaml").href]
    """
    options = resolve_load_options(options)
    scan_source, default_root = _resolve_source(source)
    root = _resolve_root(options.root_url, default_root)

    owns_client = client is None
    http_client = client if client is not None else create_client(options)
    try:
        ctx = LoadContext.from_options(root, options, http_client)
        output.debug(f"Loading {root.href}")
        schemas = await scan(scan_source, ctx)
    finally:
        if owns_client:
            await http_client.aclose()

    output.debug(f"Loaded {len(schemas)} document(s)")
    return schemas


def load_sync(source: Source, options: Optional[LoadOptions] = None) -> SchemaMap:
    """Blocking variant of :func:`load`.

    Must not be called from inside a running event loop.
    """
    return asyncio.run(load(source, options))
