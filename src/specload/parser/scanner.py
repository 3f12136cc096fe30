"""Recursively load every document reachable from a root through ``$ref`` pointers.

:func:`scan` fetches and decodes one document, rewrites the URL part of every
cross-document pointer to an absolute location, and then scans all referenced
documents concurrently. Each location is fetched at most once per load: the
visited set in :class:`~specload.parser.context.LoadContext` short-circuits
repeat visits, which also breaks reference cycles.

When the scan of the root document returns from its join, every reachable
document is in the schema map and the transformer runs over all of them.
"""

from __future__ import annotations

import asyncio
from typing import Union

from specload import output
from specload.models import Document, Location, SchemaMap
from specload.parser.context import LoadContext
from specload.parser.decoder import parse_content
from specload.parser.fetcher import fetch
from specload.parser.locator import resolve_ref_location, virtual_location
from specload.parser.refs import map_refs, parse_ref
from specload.parser.transformer import transform_refs


async def scan(source: Union[Location, Document], ctx: LoadContext) -> SchemaMap:
    """Load *source* and everything it references into ``ctx.schemas``.

    Args:
        source: A :class:`~specload.models.Location` to fetch, or an
            already-decoded in-memory document.
        ctx: Shared state for the current load.

    Returns:
        The shared schema map. It is only complete (and transformed) when
        returned from the root scan.

    Raises:
        NotFoundError, InvalidTargetError, TransportError: From fetching.
        SpecParseError, UnknownFormatError: From decoding.
        UnresolvableReferenceError: If an in-memory document holds a relative
            cross-document reference.
    """
    in_memory = not isinstance(source, Location)
    location = virtual_location() if in_memory else source
    key = location.href

    if in_memory:
        ctx.schemas[key] = source
    else:
        if key in ctx.visited:
            return ctx.schemas
        ctx.visited.add(key)

        output.debug(f"Fetching {key}")
        result = await fetch(location, ctx.client, ctx.options.http_method, ctx.headers)
        ctx.schemas[key] = parse_content(result.text, result.content_type)

    children: dict[str, Location] = {}

    def absolutize(ref: str) -> str:
        url = parse_ref(ref).url
        if not url:
            return ref
        child = resolve_ref_location(url, location)
        children.setdefault(child.href, child)
        return ref.replace(url, child.href, 1)

    ctx.schemas[key] = map_refs(ctx.schemas[key], absolutize)

    if children:
        output.debug(f"{key} references {len(children)} document(s)")
        tasks = [asyncio.ensure_future(scan(child, ctx)) for child in children.values()]
        try:
            await asyncio.gather(*tasks)
        except BaseException:
            # Siblings share the HTTP client; stop them before the error
            # reaches the loader and the client is closed.
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise

    if key == ctx.root.href:
        transform_refs(ctx.schemas, ctx.root)

    return ctx.schemas
