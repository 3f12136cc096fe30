"""Resolve :class:`~specload.models.LoadOptions` with environment overrides.

Embedding tools (code generators, CI scripts) usually build load options from
their own flags. This module layers the process environment underneath those
flags so that credentials and HTTP tuning can be injected without changing
the calling code.

Precedence (high to low):
    1. Explicit keyword overrides passed to :func:`resolve_load_options`
    2. Environment variables (``SPECLOAD_AUTH``, ``SPECLOAD_HTTP_METHOD``,
       ``SPECLOAD_HTTP_HEADERS``, ``SPECLOAD_TIMEOUT``)
    3. The *base* options object
    4. Model defaults
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional

from pydantic import ValidationError

from specload.exceptions import ConfigError
from specload.models import LoadOptions

ENV_AUTH = "SPECLOAD_AUTH"
ENV_HTTP_METHOD = "SPECLOAD_HTTP_METHOD"
ENV_HTTP_HEADERS = "SPECLOAD_HTTP_HEADERS"
ENV_TIMEOUT = "SPECLOAD_TIMEOUT"


def _env_headers() -> Optional[dict[str, Any]]:
    """Parse ``SPECLOAD_HTTP_HEADERS`` as a JSON object, if set."""
    raw = os.environ.get(ENV_HTTP_HEADERS)
    if not raw:
        return None
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{ENV_HTTP_HEADERS} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(
            f"{ENV_HTTP_HEADERS} must be a JSON object (got {type(data).__name__})"
        )
    return data


def _env_timeout() -> Optional[float]:
    raw = os.environ.get(ENV_TIMEOUT)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ConfigError(f"{ENV_TIMEOUT} must be a number (got {raw!r})") from exc


def resolve_load_options(
    base: Optional[LoadOptions] = None,
    **overrides: Any,
) -> LoadOptions:
    """Merge *base*, the environment, and explicit *overrides* into new options.

    Environment headers are merged into the base headers rather than replacing
    them; explicit ``http_headers`` overrides replace both.

    Args:
        base: Starting options. Not modified.
        **overrides: Field values (snake_case or camelCase alias) that win
            over everything else. ``None`` values are ignored.

    Returns:
        A new :class:`~specload.models.LoadOptions`.

    Raises:
        ConfigError: If an environment variable holds an invalid value or the
            merged options fail validation.
    """
    data: dict[str, Any] = (base or LoadOptions()).model_dump()

    env_auth = os.environ.get(ENV_AUTH)
    if env_auth:
        data["auth"] = env_auth

    env_method = os.environ.get(ENV_HTTP_METHOD)
    if env_method:
        data["http_method"] = env_method.upper()

    env_headers = _env_headers()
    if env_headers is not None:
        data["http_headers"] = {**data["http_headers"], **env_headers}

    env_timeout = _env_timeout()
    if env_timeout is not None:
        data["request"]["timeout"] = env_timeout

    names_by_alias = {
        info.alias: name for name, info in LoadOptions.model_fields.items() if info.alias
    }
    data.update({
        names_by_alias.get(key, key): value
        for key, value in overrides.items()
        if value is not None
    })

    try:
        return LoadOptions.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid load options: {exc}") from exc
