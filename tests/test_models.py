"""Tests for specload.models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from specload.models import LoadOptions, Location, LocationKind, RequestConfig


class TestLocation:
    def test_frozen(self) -> None:
        loc = Location(href="https://example.com/a.json", kind=LocationKind.REMOTE)
        with pytest.raises(ValidationError):
            loc.href = "https://example.com/b.json"

    def test_hashable_and_comparable(self) -> None:
        a = Location(href="file:///a.json", kind=LocationKind.LOCAL)
        b = Location(href="file:///a.json", kind=LocationKind.LOCAL)
        assert a == b
        assert len({a, b}) == 1

    def test_kind_properties(self) -> None:
        loc = Location(href="file:///a.json", kind="local")
        assert loc.is_local
        assert not loc.is_remote
        assert not loc.is_virtual
        assert str(loc) == "file:///a.json"


class TestLoadOptions:
    def test_defaults(self) -> None:
        options = LoadOptions()
        assert options.root_url is None
        assert options.schemas == {}
        assert options.url_cache == set()
        assert options.http_method == "GET"
        assert options.request == RequestConfig()

    def test_camel_case_aliases(self) -> None:
        options = LoadOptions.model_validate({
            "rootURL": "https://example.com/openapi.json",
            "urlCache": ["https://example.com/seen.json"],
            "httpHeaders": {"X-Id": 1},
            "httpMethod": "POST",
        })
        assert options.root_url == "https://example.com/openapi.json"
        assert options.url_cache == {"https://example.com/seen.json"}
        assert options.http_headers == {"X-Id": 1}
        assert options.http_method == "POST"

    def test_snake_case_names(self) -> None:
        options = LoadOptions(http_method="PUT", url_cache={"x"})
        assert options.http_method == "PUT"
        assert options.url_cache == {"x"}

    def test_header_values_kept_as_is(self) -> None:
        value = {"nested": [1, 2]}
        options = LoadOptions(http_headers={"X-Obj": value})
        assert options.http_headers["X-Obj"] == value
