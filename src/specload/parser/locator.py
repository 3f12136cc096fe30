"""Turn raw reference strings into canonical :class:`~specload.models.Location` objects.

Every key in a schema map is an absolute, canonical location string, so all
path handling is funnelled through this module:

* :func:`resolve_location` -- a user-supplied URL or path to a
  :class:`~specload.models.Location`, validating local files eagerly.
* :func:`resolve_ref_location` -- the URL part of a ``$ref`` resolved
  against the location of the document that contains it.
* :func:`relative_id` -- a location expressed relative to the root
  document's directory, used for machine-independent external ids.
"""

from __future__ import annotations

import os
import posixpath
from pathlib import Path
from urllib.parse import unquote, urljoin, urlparse
from urllib.request import url2pathname

from specload.exceptions import InvalidTargetError, NotFoundError, UnresolvableReferenceError
from specload.models import VIRTUAL_JSON_URL, Location, LocationKind

_REMOTE_PREFIXES = ("http://", "https://")


def is_remote(url: str) -> bool:
    """Return True if *url* is an absolute ``http``/``https`` URL."""
    return url.startswith(_REMOTE_PREFIXES)


def virtual_location() -> Location:
    """Return the reserved location used for in-memory documents."""
    return Location(href=VIRTUAL_JSON_URL, kind=LocationKind.VIRTUAL)


def resolve_location(url: str) -> Location:
    """Resolve a URL or filesystem path to a canonical location.

    Remote URLs are returned as-is. Anything else is treated as a local path:
    absolute paths are used directly, relative paths are resolved against the
    current working directory.

    Args:
        url: An ``http``/``https`` URL or a filesystem path.

    Returns:
        The canonical :class:`~specload.models.Location`.

    Raises:
        NotFoundError: If the local path does not exist.
        InvalidTargetError: If the local path is a directory.
    """
    if is_remote(url):
        return Location(href=url, kind=LocationKind.REMOTE)

    # Symlinks are kept: refs resolve against the directory the caller named.
    path = Path(os.path.abspath(Path(url).expanduser()))

    if not path.exists():
        raise NotFoundError(f"Could not locate {url}")
    if path.is_dir():
        raise InvalidTargetError(f"{path} is a directory not a file")

    return Location(href=path.as_uri(), kind=LocationKind.LOCAL)


def resolve_ref_location(ref_url: str, base: Location) -> Location:
    """Resolve the URL part of a ``$ref`` relative to the document containing it.

    Remote URLs are absolute and ignore *base*. Everything else follows
    standard relative-URL semantics against ``base.href``, so a local document
    may reference a remote one and a remote document may reference siblings on
    the same host.

    Raises:
        UnresolvableReferenceError: If *ref_url* is relative and *base* is the
            virtual location of an in-memory document.
    """
    if is_remote(ref_url):
        return Location(href=ref_url, kind=LocationKind.REMOTE)

    if base.is_virtual:
        raise UnresolvableReferenceError(
            f'Can\'t load URL "{ref_url}" from dynamic JSON. '
            "Load this schema from a URL instead."
        )

    href = urljoin(base.href, ref_url.replace("\\", "/"))
    if is_remote(href):
        return Location(href=href, kind=LocationKind.REMOTE)
    return Location(href=_canonical_file_url(href), kind=LocationKind.LOCAL)


def _canonical_file_url(href: str) -> str:
    """Re-encode a joined ``file://`` URL the way :meth:`Path.as_uri` does.

    A ref such as ``"my api.json"`` joins to an unencoded URL, while root ids
    come from :meth:`Path.as_uri`; both must produce the same key.
    """
    parsed = urlparse(href)
    if parsed.scheme != "file":
        return href
    return Path(url2pathname(parsed.path)).as_uri()


def _file_path(href: str) -> str | None:
    """Return the POSIX path of a ``file://`` URL, or None for other schemes."""
    parsed = urlparse(href)
    if parsed.scheme != "file":
        return None
    return unquote(parsed.path)


def relative_id(href: str, root: Location) -> str:
    """Express *href* relative to the directory of the root document.

    Only applies when both *href* and *root* are local files; otherwise
    *href* is returned unchanged. The virtual location is never relativized.

    Example::

        >>> root = Location(href="file:///specs/a.json", kind=LocationKind.LOCAL)
        >>> relative_id("file:///specs/schemas/b.json", root)
        'schemas/b.json'
    """
    if not root.is_local or href == VIRTUAL_JSON_URL:
        return href
    child_path = _file_path(href)
    root_path = _file_path(root.href)
    if child_path is None or root_path is None:
        return href
    return posixpath.relpath(child_path, posixpath.dirname(root_path))
