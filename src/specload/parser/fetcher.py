"""Retrieve raw document text for a :class:`~specload.models.Location`.

Local files are read from disk; remote documents are requested with
:class:`httpx.AsyncClient`. Either way the result carries a content-type hint
that :func:`~specload.parser.decoder.parse_content` uses to pick a decoder.

Request headers are assembled once per load by
:func:`build_request_headers`: a default ``User-Agent``, an optional
``Authorization`` header, and caller-supplied custom headers on top.
"""

from __future__ import annotations

import asyncio
import json
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Any
from urllib.parse import urlparse
from urllib.request import url2pathname

import httpx

from specload import __version__
from specload import output
from specload.exceptions import (
    InvalidTargetError,
    NotFoundError,
    SpecParseError,
    TransportError,
)
from specload.models import LoadOptions, Location

USER_AGENT = f"specload/{__version__}"

_EXTENSION_CONTENT_TYPES = {
    ".json": "application/json",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
}


@dataclass(frozen=True)
class FetchResult:
    """Raw document text plus the content type it was served or stored as."""

    text: str
    content_type: str = ""


def parse_http_headers(http_headers: dict[str, Any]) -> dict[str, str]:
    """Coerce custom header values to strings.

    String values pass through unchanged; anything else is JSON-encoded. A
    value that cannot be encoded is dropped with a warning and the remaining
    headers are still returned.

    Example::

        >>> parse_http_headers({"X-Id": "abc", "X-Flags": {"beta": True}})
        {'X-Id': 'abc', 'X-Flags': '{"beta": true}'}
    """
    final_headers: dict[str, str] = {}
    for key, value in http_headers.items():
        if isinstance(value, str):
            final_headers[key] = value
            continue
        try:
            final_headers[key] = json.dumps(value)
        except (TypeError, ValueError):
            output.warning(
                f"Cannot parse key: {key} into JSON format. "
                "Continuing with the next HTTP header that is specified"
            )
    return final_headers


def _authorization_value(auth: str) -> str:
    # A bare token is sent as a bearer token; "Basic xyz", "Bearer xyz" etc. pass through.
    if " " in auth.strip():
        return auth.strip()
    return f"Bearer {auth.strip()}"


def build_request_headers(options: LoadOptions) -> dict[str, str]:
    """Merge default, auth, and custom headers for remote fetches.

    Custom headers from ``options.http_headers`` take precedence over the
    defaults, so a caller can override ``User-Agent`` or ``Authorization``.
    """
    headers: dict[str, str] = {"User-Agent": USER_AGENT}
    if options.auth:
        headers["Authorization"] = _authorization_value(options.auth)
    if options.http_headers:
        headers.update(parse_http_headers(options.http_headers))
    return headers


def content_type_for_path(path: str) -> str:
    """Guess a content type from a file extension. Empty if unknown."""
    suffix = Path(path).suffix.lower()
    if suffix in _EXTENSION_CONTENT_TYPES:
        return _EXTENSION_CONTENT_TYPES[suffix]
    guessed, _ = mimetypes.guess_type(path)
    return guessed or ""


def _strip_parameters(content_type: str) -> str:
    """``application/json; charset=utf-8`` -> ``application/json``."""
    return content_type.split(";", 1)[0].strip().lower()


async def _fetch_local(location: Location) -> FetchResult:
    path = url2pathname(urlparse(location.href).path)
    try:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
    except IsADirectoryError as exc:
        raise InvalidTargetError(f"{path} is a directory not a file") from exc
    except UnicodeDecodeError as exc:
        raise SpecParseError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise NotFoundError(f"Could not read {path}: {exc}") from exc
    return FetchResult(text=text, content_type=content_type_for_path(path))


async def _fetch_remote(
    location: Location,
    client: httpx.AsyncClient,
    method: str,
    headers: dict[str, str],
) -> FetchResult:
    try:
        response = await client.request(method, location.href, headers=headers)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            f"HTTP {exc.response.status_code} fetching {location.href}"
        ) from exc
    except httpx.RequestError as exc:
        raise TransportError(f"Failed to fetch {location.href}: {exc}") from exc

    content_type = _strip_parameters(response.headers.get("content-type", ""))
    return FetchResult(text=response.text, content_type=content_type)


async def fetch(
    location: Location,
    client: httpx.AsyncClient,
    method: str = "GET",
    headers: dict[str, str] | None = None,
) -> FetchResult:
    """Fetch the raw text of *location*.

    Args:
        location: A local or remote location. Virtual locations have no
            content to fetch and must not be passed here.
        client: HTTP client for remote locations.
        method: HTTP method for remote requests.
        headers: Request headers, usually from :func:`build_request_headers`.

    Returns:
        The document text and its content-type hint.

    Raises:
        NotFoundError: If a local file cannot be read.
        SpecParseError: If a local file is not valid UTF-8.
        TransportError: If a remote request fails or returns a non-2xx status.
    """
    if location.is_local:
        return await _fetch_local(location)
    return await _fetch_remote(location, client, method, headers or {})
