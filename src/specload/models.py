"""Canonical Pydantic models shared across all specload modules.

This is the single source of truth for data shapes in the project. The models
fall into two groups:

**Location models** -- canonical identifiers for documents:
    :class:`LocationKind` and :class:`Location`.

**Configuration models** -- options supplied by the caller for one load:
    :class:`RequestConfig` and :class:`LoadOptions`.

Decoded schema content is not modelled: it is an arbitrary JSON/YAML tree,
described by the :data:`Document` alias, and collected into a
:data:`SchemaMap`.
"""

from __future__ import annotations

import enum
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Document = Union[None, bool, int, float, str, list["Document"], dict[str, "Document"]]
"""A decoded JSON/YAML tree. ``$ref`` pointers may appear at any depth."""

SchemaMap = dict[str, Document]
"""Location id (or, after transformation, root-relative id) to :data:`Document`."""

VIRTUAL_JSON_URL = "file:///_json"
"""Reserved id for a caller-supplied in-memory document."""


# --- Locations ---


class LocationKind(str, enum.Enum):
    """Where a document lives."""

    REMOTE = "remote"
    LOCAL = "local"
    VIRTUAL = "virtual"


class Location(BaseModel):
    """Canonical absolute identifier for a schema document.

    ``href`` is always absolute: an ``http``/``https`` URL for
    :attr:`LocationKind.REMOTE`, a ``file://`` URL for
    :attr:`LocationKind.LOCAL`, and :data:`VIRTUAL_JSON_URL` for
    :attr:`LocationKind.VIRTUAL`. Instances are immutable and hashable so they
    can be compared and used as dict keys.

    Build instances with :func:`~specload.parser.locator.resolve_location`
    rather than directly; that function performs the existence checks.
    """

    model_config = ConfigDict(frozen=True)

    href: str
    kind: LocationKind

    @property
    def is_local(self) -> bool:
        return self.kind == LocationKind.LOCAL

    @property
    def is_remote(self) -> bool:
        return self.kind == LocationKind.REMOTE

    @property
    def is_virtual(self) -> bool:
        return self.kind == LocationKind.VIRTUAL

    def __str__(self) -> str:
        return self.href


# --- Load configuration ---


class RequestConfig(BaseModel):
    """HTTP settings used when fetching remote documents."""

    timeout: float = Field(default=30.0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    max_retries: int = Field(
        default=0, description="Connection-level retries performed by the HTTP transport"
    )
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")


class LoadOptions(BaseModel):
    """Options for a single top-level load.

    Field names are snake_case; the camelCase aliases (``rootURL``,
    ``urlCache``, ``httpHeaders``, ``httpMethod``) are also accepted so that
    option dicts written for other tooling can be passed through unchanged.

    ``schemas`` and ``url_cache`` pre-seed the schema map and the visited set
    for incremental loads. They are copied into the load context, never
    mutated in place.

    Example::

        LoadOptions(
            http_headers={"X-Tenant": "acme", "X-Flags": {"beta": True}},
            auth="s3cr3t",
        )
    """

    model_config = ConfigDict(populate_by_name=True)

    root_url: Optional[Union[Location, str]] = Field(
        default=None,
        alias="rootURL",
        description="Canonical root location; defaults to the loaded source",
    )
    schemas: dict[str, Any] = Field(
        default_factory=dict, description="Pre-seeded schema map"
    )
    url_cache: set[str] = Field(
        default_factory=set, alias="urlCache", description="Pre-seeded visited set"
    )
    http_headers: dict[str, Any] = Field(
        default_factory=dict,
        alias="httpHeaders",
        description="Extra request headers; non-string values are JSON-encoded",
    )
    http_method: str = Field(default="GET", alias="httpMethod")
    auth: Optional[str] = Field(
        default=None,
        description="Bearer token (or full Authorization value) for remote fetches",
    )
    request: RequestConfig = Field(default_factory=RequestConfig)
