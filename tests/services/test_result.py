"""Tests for ServiceResult and ServiceError."""

import json

import pytest

from apimodel.domain.errors import DuplicateKeyError, ResourceNotFoundError
from apimodel.services.result import ServiceError, ServiceResult


class TestServiceResult:
    def test_success_construction(self) -> None:
        result = ServiceResult(ok=True, op="href", data={"href": "http://x/data/v1/a"})
        assert result.ok is True
        assert result.op == "href"
        assert result.warnings == []
        assert result.error is None

    def test_failure_from_exception(self) -> None:
        result = ServiceResult.failure("href", ResourceNotFoundError("unknown", 1))
        assert result.ok is False
        assert result.error is not None
        assert result.error.code == "RESOURCE_NOT_FOUND"
        assert result.error.message == "resource not found: unknown/1"
        assert result.error.detail == {"name": "unknown", "version": 1}

    def test_json_serialization(self) -> None:
        result = ServiceResult.failure("validate", DuplicateKeyError("action names", ["create"]))
        parsed = json.loads(result.model_dump_json())
        assert parsed["ok"] is False
        assert parsed["error"]["code"] == "DUPLICATE_KEY"
        assert parsed["error"]["detail"]["keys"] == ["create"]

    def test_frozen(self) -> None:
        result = ServiceResult(ok=True, op="test")
        with pytest.raises(Exception):
            result.ok = False  # type: ignore[misc]


class TestServiceError:
    def test_detail_defaults_empty(self) -> None:
        assert ServiceError(code="X", message="y").detail == {}
