"""Rewrite absolute ``$ref`` pointers into their final namespaced form.

Runs once, after every document reachable from the root has been scanned.
By then each cross-document pointer carries an absolute URL part, so the
three rewriting rules can be decided by comparing locations:

1. **External** -- the pointer names a document other than the root, or it is
   a same-document pointer inside a non-root document. It becomes
   ``external["<id>"]["part"]...`` where ``<id>`` is the target document's
   root-relative id.
2. **Shorthand collapse** -- for root-internal pointers whose second-to-last
   part is ``properties`` that segment is dropped, so
   ``#/components/schemas/Pet/properties/name`` addresses
   ``components["schemas"]["Pet"]["name"]``.
3. **Root-internal** -- everything else becomes ``first["rest"]...``.

Pointers without a ``#`` are already final and are left alone, which makes
the pass idempotent. Non-root documents are finally moved to their
root-relative key so that ids do not depend on the machine the load ran on.
"""

from __future__ import annotations

from specload import output
from specload.models import Location, SchemaMap
from specload.parser.locator import relative_id
from specload.parser.refs import map_refs, parse_ref


def _index(parts: list[str]) -> str:
    return '["' + '"]["'.join(parts) + '"]'


def _external(doc_id: str, parts: list[str]) -> str:
    return f'external["{doc_id}"]{_index(parts)}'


def transform_ref(ref: str, containing_key: str, root: Location) -> str:
    """Return the final form of a single ``$ref`` value.

    Args:
        ref: The pointer as left by the scanner (URL part absolute).
        containing_key: Schema map key of the document the pointer lives in.
        root: Location of the root document.
    """
    if "#" not in ref:
        return ref

    parsed = parse_ref(ref)

    if parsed.url and parsed.url != root.href:
        return _external(relative_id(parsed.url, root), parsed.parts)

    if not parsed.url and containing_key != root.href:
        return _external(relative_id(containing_key, root), parsed.parts)

    parts = list(parsed.parts)
    if len(parts) >= 2 and parts[-2] == "properties":
        del parts[-2]

    if not parts:
        return _index([""])
    base, *rest = parts
    return f"{base}{_index(rest)}"


def transform_refs(schemas: SchemaMap, root: Location) -> SchemaMap:
    """Rewrite every pointer in *schemas* and rename non-root keys in place.

    Args:
        schemas: The complete schema map of a load.
        root: Location of the root document.

    Returns:
        *schemas*, for chaining.
    """
    output.debug(f"Transforming $refs in {len(schemas)} document(s)")
    for key, document in list(schemas.items()):
        schemas[key] = map_refs(
            document, lambda ref, key=key: transform_ref(ref, key, root)
        )

        if key == root.href:
            continue
        new_key = relative_id(key, root)
        if new_key != key:
            schemas[new_key] = schemas.pop(key)
    return schemas
