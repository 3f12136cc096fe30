"""Decode raw document text into a Python tree.

The content type reported by the fetcher decides how strictly the text is
decoded:

* a YAML content type decodes as YAML only,
* a JSON content type decodes as JSON only,
* anything else tries JSON first and then YAML.

JSON goes first in the fallback so that a broken document meant as JSON is
reported as a JSON error instead of being accepted by the far more permissive
YAML decoder as a plain scalar.
"""

from __future__ import annotations

import json
from typing import Any

import yaml

from specload.exceptions import SpecParseError, UnknownFormatError

YAML_CONTENT_TYPES = frozenset({
    "application/openapi+yaml",
    "application/yaml",
    "application/x-yaml",
    "text/yaml",
    "text/x-yaml",
})

JSON_CONTENT_TYPES = frozenset({
    "application/json",
    "application/json5",
    "application/openapi+json",
})


def _load_yaml(content: str) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise SpecParseError(f"YAML: {exc}") from exc


def _load_json(content: str) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise SpecParseError(f"JSON: {exc}") from exc


def parse_content(content: str, content_type: str = "") -> Any:
    """Parse *content* as JSON or YAML according to *content_type*.

    Args:
        content: The raw document text.
        content_type: A MIME type hint such as ``application/json`` or
            ``text/yaml``. Parameters (``; charset=utf-8``) must already be
            stripped. Empty when unknown.

    Returns:
        The decoded document.

    Raises:
        SpecParseError: If the content type is declared and decoding fails.
        UnknownFormatError: If the content type is unknown and the content
            is neither valid JSON nor valid YAML.
    """
    if content_type in YAML_CONTENT_TYPES:
        return _load_yaml(content)
    if content_type in JSON_CONTENT_TYPES:
        return _load_json(content)

    try:
        return _load_json(content)
    except SpecParseError:
        pass
    try:
        return _load_yaml(content)
    except SpecParseError:
        pass

    hint = f': "{content_type}"' if content_type else ""
    raise UnknownFormatError(f"Unknown format{hint}. Only YAML or JSON supported.")
