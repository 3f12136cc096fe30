"""Helpers for ``$ref`` pointer strings.

* :func:`parse_ref` splits a pointer into its URL part and decoded path parts.
* :func:`map_refs` is a pure tree rewrite: it returns a structural copy of a
  document with every ``$ref`` string replaced by the result of a callback.

Both the scanner and the transformer walk documents through :func:`map_refs`;
neither mutates the input tree.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

from specload.models import Document

REF_KEY = "$ref"


@dataclass(frozen=True)
class ParsedRef:
    """A ``$ref`` split at the fragment delimiter.

    Attributes:
        url: The part before ``#``, or ``None`` when it is empty (a
            same-document reference) or when there is no ``#`` at all.
        parts: Path components of the fragment, JSON-pointer decoded, with
            empty segments dropped.
    """

    url: Optional[str] = None
    parts: list[str] = field(default_factory=list)


def _decode_part(part: str) -> str:
    # RFC 6901: ~1 before ~0 so that "~01" decodes to "~1"
    return part.replace("~1", "/").replace("~0", "~")


def parse_ref(ref: str) -> ParsedRef:
    """Split a ``$ref`` value into URL and path parts.

    Example::

        >>> parse_ref("./pets.yaml#/components/schemas/Pet")
        ParsedRef(url='./pets.yaml', parts=['components', 'schemas', 'Pet'])
        >>> parse_ref("#/definitions/a~1b")
        ParsedRef(url=None, parts=['definitions', 'a/b'])

    Strings without a ``#`` yield an empty :class:`ParsedRef`; they are
    treated as already transformed.
    """
    if "#" not in ref:
        return ParsedRef()
    url, _, fragment = ref.partition("#")
    parts = [_decode_part(p) for p in fragment.split("/") if p]
    return ParsedRef(url=url or None, parts=parts)


def map_refs(node: Document, fn: Callable[[str], str]) -> Document:
    """Return a copy of *node* with every ``$ref`` string passed through *fn*.

    Dicts and lists are rebuilt; scalars are returned as-is. Only string
    values stored directly under a ``$ref`` key are rewritten, so a property
    literally named ``$ref`` whose value is an object is walked like any other
    mapping.

    Args:
        node: A decoded document (or any sub-tree of one).
        fn: Called with the original pointer string; its return value is
            stored in the copy.
    """
    if isinstance(node, dict):
        result: dict[str, Document] = {}
        for key, value in node.items():
            if key == REF_KEY and isinstance(value, str):
                result[key] = fn(value)
            else:
                result[key] = map_refs(value, fn)
        return result
    if isinstance(node, list):
        return [map_refs(item, fn) for item in node]
    return node
