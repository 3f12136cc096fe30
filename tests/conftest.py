"""Shared test fixtures for specload.

Provides helpers for writing schema documents into a temporary directory,
a programmable fake HTTP server built on :class:`httpx.MockTransport`, and
output-state management. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
import yaml

from specload.config import ENV_AUTH, ENV_HTTP_HEADERS, ENV_HTTP_METHOD, ENV_TIMEOUT
from specload.output import OutputManager, reset_output, set_output


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager's Rich console captures ``sys.stderr`` at creation
    time. Resetting forces a fresh manager (bound to the current, possibly
    capsys-patched stream) to be created on next use.
    """
    yield
    reset_output()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's ``SPECLOAD_*`` variables out of every load."""
    for var in (ENV_AUTH, ENV_HTTP_HEADERS, ENV_HTTP_METHOD, ENV_TIMEOUT):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a quiet output manager for tests that don't care about output."""
    output = OutputManager(no_color=True, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# Local documents
# ---------------------------------------------------------------------------


@pytest.fixture
def spec_dir(tmp_path: Path) -> Path:
    """Resolved temporary directory (symlinks such as /private on macOS removed)."""
    return tmp_path.resolve()


@pytest.fixture
def write_doc(spec_dir: Path) -> Callable[[str, Any], Path]:
    """Return a helper that writes a document under ``spec_dir``.

    The format follows the file extension: ``.yaml``/``.yml`` are dumped as
    YAML, everything else as JSON. A ``str`` document is written verbatim.
    """

    def _write(name: str, document: Any) -> Path:
        path = spec_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(document, str):
            text = document
        elif path.suffix in (".yaml", ".yml"):
            text = yaml.safe_dump(document, sort_keys=False)
        else:
            text = json.dumps(document, indent=2)
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# ---------------------------------------------------------------------------
# Remote documents
# ---------------------------------------------------------------------------


class FakeServer:
    """In-memory HTTP server for :class:`httpx.MockTransport`.

    Routes map absolute URLs to ``(status, body, content_type, delay)``.
    Every handled request is recorded in :attr:`requests`.
    """

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, str, str, float]] = {}
        self.requests: list[httpx.Request] = []

    def add(
        self,
        url: str,
        document: Any,
        content_type: str = "application/json",
        status: int = 200,
        delay: float = 0.0,
    ) -> None:
        body = document if isinstance(document, str) else json.dumps(document)
        self.routes[url] = (status, body, content_type, delay)

    def hits(self, url: str) -> int:
        return sum(1 for r in self.requests if str(r.url) == url)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        url = str(request.url)
        if url not in self.routes:
            return httpx.Response(404, request=request)
        status, body, content_type, delay = self.routes[url]
        if delay:
            await asyncio.sleep(delay)
        headers = {"content-type": content_type} if content_type else {}
        return httpx.Response(
            status,
            content=body.encode("utf-8"),
            headers=headers,
            request=request,
        )

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def server() -> FakeServer:
    """A fresh :class:`FakeServer` per test."""
    return FakeServer()
