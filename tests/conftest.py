"""Shared pytest fixtures for apimodel tests."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from apimodel.domain.api import Domain
from apimodel.domain.resource import Resource

CONFIG_SHAPE: dict[str, str] = {
    "namespace": "ns://runrightfast.co/config",
    "version": "1.1.1",
    "type": "ObjectSchemaManagerConfig",
}

APPLICATIONS: dict[str, Any] = {
    "name": "applications",
    "version": 1,
    "objectShape": {
        "namespace": "ns://runrightfast.co/applications",
        "version": "1.0.0",
        "type": "Application",
    },
    "description": "Applications",
    "tags": ["app"],
    "actions": [
        {
            "name": "create",
            "title": "Create",
            "method": "POST",
            "requestPayloadShape": CONFIG_SHAPE,
        },
        {
            "name": "delete",
            "title": "Delete",
            "method": "DELETE",
            "path": "/{id}",
        },
    ],
    "links": [
        {
            "href": "http://api.runrightfast.co/data/v1/object-schema-manager/config",
            "title": "Object Schema Manager Configuration",
            "rel": "config",
            "auth": ["hawk"],
        }
    ],
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def resource_record() -> dict[str, Any]:
    """A fresh, valid ``applications`` v1 resource record."""
    return copy.deepcopy(APPLICATIONS)


@pytest.fixture
def domain_record(resource_record: dict[str, Any]) -> dict[str, Any]:
    """A valid domain record with a single resource."""
    return {"name": "api.runrightfast.co", "resources": [resource_record]}


@pytest.fixture
def resource(resource_record: dict[str, Any]) -> Resource:
    return Resource(resource_record)


@pytest.fixture
def domain(domain_record: dict[str, Any]) -> Domain:
    return Domain(domain_record)


@pytest.fixture
def document_path(tmp_path: Path, domain_record: dict[str, Any]) -> Path:
    """The domain record written to ``api.json`` in a temp project root."""
    path = tmp_path / "api.json"
    path.write_text(json.dumps(domain_record), encoding="utf-8")
    return path


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run with CWD at a temp project root and no config env overrides."""
    monkeypatch.chdir(tmp_path)
    for var in ("APIMODEL_CONFIG", "APIMODEL_DOCUMENT_FILE", "APIMODEL_JSON_OUTPUT"):
        monkeypatch.delenv(var, raising=False)
