"""Tests for the pure href helpers."""

from __future__ import annotations

import pytest

from apimodel.domain.hrefs import (
    base_url,
    encode_query,
    normalize_path,
    resource_path,
    substitute_path_variables,
)


class TestNormalizePath:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("_batch", "/_batch"), ("/id", "/id"), ("", ""), (None, ""), ("{id}", "/{id}")],
    )
    def test_normalize(self, raw: str | None, expected: str) -> None:
        assert normalize_path(raw) == expected


class TestBaseUrl:
    def test_http_without_port(self) -> None:
        assert base_url("api.example.com") == "http://api.example.com"

    def test_https(self) -> None:
        assert base_url("api.example.com", use_https=True) == "https://api.example.com"

    def test_port(self) -> None:
        assert base_url("localhost", port=8080) == "http://localhost:8080"

    def test_port_zero_is_kept(self) -> None:
        assert base_url("localhost", port=0) == "http://localhost:0"


class TestResourcePath:
    def test_layout(self) -> None:
        assert resource_path("schema", 2, "applications") == "/schema/v2/applications"


class TestEncodeQuery:
    def test_boolean(self) -> None:
        assert encode_query({"version": True, "draft": False}) == "version=true&draft=false"

    def test_numbers(self) -> None:
        assert encode_query({"page": 2, "ratio": 1.0, "x": 0.5}) == "page=2&ratio=1&x=0.5"

    def test_percent_encoding(self) -> None:
        assert encode_query({"q": "a b&c=d/é"}) == "q=a%20b%26c%3Dd%2F%C3%A9"

    def test_unreserved_kept(self) -> None:
        assert encode_query({"k": "a-b_c.d~e!f*g'h(i)"}) == "k=a-b_c.d~e!f*g'h(i)"

    def test_list_repeats_key(self) -> None:
        assert encode_query({"tag": ["a", "b"]}) == "tag=a&tag=b"

    def test_none_is_empty(self) -> None:
        assert encode_query({"q": None}) == "q="

    def test_empty(self) -> None:
        assert encode_query({}) == ""


class TestSubstitutePathVariables:
    def test_substitutes(self) -> None:
        assert substitute_path_variables("/a/{id}", {"id": "123"}) == "/a/123"

    def test_every_occurrence(self) -> None:
        assert substitute_path_variables("/{id}/x/{id}", {"id": 7}) == "/7/x/7"

    def test_unmatched_placeholder_left(self) -> None:
        assert substitute_path_variables("/{id}/{rev}", {"id": "1"}) == "/1/{rev}"

    def test_encoded_placeholder_untouched(self) -> None:
        assert substitute_path_variables("/a?q=%7Bid%7D", {"id": "1"}) == "/a?q=%7Bid%7D"
