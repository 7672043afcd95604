"""Enumerations shared by the model entities."""

from __future__ import annotations

from enum import StrEnum


class HttpMethod(StrEnum):
    """HTTP methods an action may declare."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class HrefType(StrEnum):
    """Top-level path segment of a resource href."""

    DATA = "data"
    SCHEMA = "schema"
    SERVICE = "service"
