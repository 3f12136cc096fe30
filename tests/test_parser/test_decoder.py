"""Tests for specload.parser.decoder."""

from __future__ import annotations

import textwrap

import pytest

from specload.exceptions import SpecParseError, UnknownFormatError
from specload.parser.decoder import parse_content


class TestDeclaredYaml:
    @pytest.mark.parametrize(
        "content_type",
        ["text/yaml", "application/openapi+yaml", "application/x-yaml", "application/yaml"],
    )
    def test_decodes_yaml(self, content_type: str) -> None:
        content = textwrap.dedent("""\
            openapi: "3.0.3"
            info:
              title: YAML Test
        """)
        result = parse_content(content, content_type)
        assert result == {"openapi": "3.0.3", "info": {"title": "YAML Test"}}

    def test_invalid_yaml_raises(self) -> None:
        with pytest.raises(SpecParseError, match="YAML"):
            parse_content("key: [unclosed", "text/yaml")

    def test_invalid_yaml_is_not_unknown_format(self) -> None:
        with pytest.raises(SpecParseError) as exc_info:
            parse_content("key: [unclosed", "text/yaml")
        assert not isinstance(exc_info.value, UnknownFormatError)


class TestDeclaredJson:
    @pytest.mark.parametrize(
        "content_type",
        ["application/json", "application/json5", "application/openapi+json"],
    )
    def test_decodes_json(self, content_type: str) -> None:
        assert parse_content('{"key": "value"}', content_type) == {"key": "value"}

    def test_yaml_content_with_json_type_raises(self) -> None:
        with pytest.raises(SpecParseError, match="JSON"):
            parse_content("key: value", "application/json")


class TestUndeclaredFormat:
    def test_json_content(self) -> None:
        assert parse_content('{"a": [1, 2]}') == {"a": [1, 2]}

    def test_yaml_only_content(self) -> None:
        assert parse_content("key: value\nnested:\n  a: 1") == {"key": "value", "nested": {"a": 1}}

    def test_unrecognized_type_falls_back(self) -> None:
        assert parse_content("key: value", "text/plain") == {"key": "value"}

    def test_neither_format_raises(self) -> None:
        with pytest.raises(UnknownFormatError, match="Only YAML or JSON supported"):
            parse_content("}{not valid at all][")

    def test_error_includes_hint(self) -> None:
        with pytest.raises(UnknownFormatError, match='"text/html"'):
            parse_content("}{not valid at all][", "text/html")

    def test_error_without_hint(self) -> None:
        with pytest.raises(UnknownFormatError) as exc_info:
            parse_content("}{not valid at all][")
        assert str(exc_info.value) == "Unknown format. Only YAML or JSON supported."

    def test_unknown_format_is_parse_error(self) -> None:
        with pytest.raises(SpecParseError):
            parse_content("}{not valid at all][")
