"""Shared state for one top-level load."""

from __future__ import annotations

from dataclasses import dataclass, field

import httpx

from specload.models import LoadOptions, Location, SchemaMap
from specload.parser.fetcher import build_request_headers


@dataclass
class LoadContext:
    """Everything a scan needs, passed explicitly through the recursion.

    ``schemas`` and ``visited`` are shared by every concurrently running scan
    of the load. Both only grow while scanning: a key is added to
    ``visited`` before the first ``await`` of the scan that owns it, so no two
    tasks ever write the same schema map key.

    Attributes:
        root: Location of the root document. Only the scan whose key equals
            ``root.href`` runs the transformer.
        options: The caller's load options.
        client: HTTP client used for remote fetches.
        headers: Request headers for remote fetches, built once per load.
        schemas: Location id to decoded document.
        visited: Location ids already claimed by a scan.
    """

    root: Location
    options: LoadOptions
    client: httpx.AsyncClient
    headers: dict[str, str] = field(default_factory=dict)
    schemas: SchemaMap = field(default_factory=dict)
    visited: set[str] = field(default_factory=set)

    @classmethod
    def from_options(
        cls,
        root: Location,
        options: LoadOptions,
        client: httpx.AsyncClient,
    ) -> LoadContext:
        """Build a context, copying any pre-seeded state out of *options*."""
        return cls(
            root=root,
            options=options,
            client=client,
            headers=build_request_headers(options),
            schemas=dict(options.schemas),
            visited=set(options.url_cache),
        )
