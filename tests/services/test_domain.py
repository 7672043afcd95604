"""Tests for DomainService."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from apimodel.services.domain import DomainService


def _write(path: Path, record: dict[str, Any]) -> Path:
    path.write_text(json.dumps(record), encoding="utf-8")
    return path


class TestValidate:
    def test_valid_document(self, document_path: Path) -> None:
        result = DomainService(document_path).validate()
        assert result.ok
        assert result.op == "validate"
        assert result.data["domain"] == "api.runrightfast.co"
        assert result.data["count"] == 1
        assert result.data["base_url"] == "http://api.runrightfast.co"
        assert result.warnings == []

    def test_missing_document(self, tmp_path: Path) -> None:
        result = DomainService(tmp_path / "missing.json").validate()
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "DOCUMENT_ERROR"

    def test_invalid_document(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "api.json", {"name": "x", "resources": [{"name": "a"}]})
        result = DomainService(path).validate()
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"
        assert "resources.0.version: Field required" in result.error.detail["errors"]

    def test_duplicate_resources(self, tmp_path: Path, domain_record: dict[str, Any]) -> None:
        domain_record["resources"] *= 2
        result = DomainService(_write(tmp_path / "api.json", domain_record)).validate()
        assert result.error is not None
        assert result.error.code == "DUPLICATE_KEY"
        assert result.error.detail["keys"] == ["applications/1"]

    def test_warns_on_empty_domain(self, tmp_path: Path) -> None:
        path = _write(tmp_path / "api.json", {"name": "x", "resources": []})
        result = DomainService(path).validate()
        assert result.ok
        assert result.warnings == ["Domain declares no resources"]

    def test_warns_on_bare_resource(self, tmp_path: Path, domain_record: dict[str, Any]) -> None:
        del domain_record["resources"][0]["actions"]
        del domain_record["resources"][0]["links"]
        result = DomainService(_write(tmp_path / "api.json", domain_record)).validate()
        assert result.warnings == ["Resource applications/1 declares no actions or links"]

    def test_domain_is_cached(self, document_path: Path) -> None:
        svc = DomainService(document_path)
        assert svc.domain is svc.domain


class TestListResources:
    def test_items(self, tmp_path: Path, domain_record: dict[str, Any]) -> None:
        second = dict(domain_record["resources"][0], version=2, actions=[], links=[])
        domain_record["resources"].insert(0, second)
        result = DomainService(_write(tmp_path / "api.json", domain_record)).list_resources()
        assert result.ok
        assert result.data["count"] == 2
        assert [item["key"] for item in result.data["items"]] == [
            "applications/1",
            "applications/2",
        ]
        first = result.data["items"][0]
        assert first["actions"] == ["create", "delete"]
        assert first["links"] == ["config"]
        assert first["tags"] == ["app"]


class TestShowResource:
    def test_found(self, document_path: Path) -> None:
        result = DomainService(document_path).show_resource("applications", 1)
        assert result.ok
        assert result.data["href"] == "http://api.runrightfast.co/data/v1/applications"
        assert result.data["actions"][1]["path"] == "/{id}"

    def test_not_found(self, document_path: Path) -> None:
        result = DomainService(document_path).show_resource("applications", 9)
        assert result.error is not None
        assert result.error.code == "RESOURCE_NOT_FOUND"


class TestHref:
    def test_data(self, document_path: Path) -> None:
        result = DomainService(document_path).href("applications", 1)
        assert result.data == {"href": "http://api.runrightfast.co/data/v1/applications"}

    def test_schema_with_action(self, document_path: Path) -> None:
        result = DomainService(document_path).href(
            "applications", 1, href_type="schema", action="delete"
        )
        assert result.data["href"] == "http://api.runrightfast.co/schema/v1/applications/{id}"

    def test_unknown_action(self, document_path: Path) -> None:
        result = DomainService(document_path).href("applications", 1, action="nonexistent")
        assert result.error is not None
        assert result.error.code == "UNKNOWN_ACTION"

    def test_unknown_resource(self, document_path: Path) -> None:
        result = DomainService(document_path).href("unknown", 1)
        assert result.error is not None
        assert result.error.code == "RESOURCE_NOT_FOUND"


class TestLinkHref:
    def test_link_href(self, document_path: Path) -> None:
        result = DomainService(document_path).link_href(
            "applications",
            1,
            "{id}",
            query_string={"version": True},
            path_variables={"id": "123"},
        )
        assert result.ok
        assert result.data["href"] == (
            "http://api.runrightfast.co/data/v1/applications/123?version=true"
        )

    def test_invalid_params(self, document_path: Path) -> None:
        result = DomainService(document_path).link_href("applications", 1, "")
        assert result.error is not None
        assert result.error.code == "VALIDATION_ERROR"
