"""Domain — the root of an API model and the source of its hrefs.

A domain names the host that serves its resources and indexes them by
:class:`ResourceKey`. All href derivation goes through the domain because
only it knows the scheme, host, and port.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from operator import attrgetter
from types import MappingProxyType
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
    StringConstraints,
)

from apimodel.domain.errors import AlreadyExistsError, ResourceNotFoundError
from apimodel.domain.hrefs import (
    base_url,
    encode_query,
    normalize_path,
    substitute_path_variables,
)
from apimodel.domain.resource import Resource, ResourceKey, ResourceRecord
from apimodel.domain.types import HrefType
from apimodel.domain.validation import RECORD_CONFIG, index_unique, validate_record

logger = logging.getLogger(__name__)


def _encodable(value: str) -> str:
    # Lone surrogates cannot be percent-encoded.
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise ValueError(f"not encodable as UTF-8: {exc.reason}") from exc
    return value


UrlText = Annotated[StrictStr, AfterValidator(_encodable)]
PathValue = UrlText | StrictBool | StrictInt | StrictFloat
QueryValue = PathValue | None


class DomainRecord(BaseModel):
    """Declarative shape of a domain."""

    model_config = RECORD_CONFIG

    name: Annotated[str, StringConstraints(min_length=1)]
    description: str | None = None
    use_https: bool = False
    port: Annotated[StrictInt, Field(ge=0)] | None = None
    resources: tuple[ResourceRecord, ...]


class ResourceHrefParams(BaseModel):
    model_config = {"frozen": True}

    name: Annotated[str, StringConstraints(min_length=1)]
    version: Annotated[StrictInt, Field(ge=1)]
    href_type: HrefType = HrefType.DATA


class ResourceLinkHrefParams(BaseModel):
    model_config = {"frozen": True}

    name: Annotated[str, StringConstraints(min_length=1)]
    version: Annotated[StrictInt, Field(ge=1)]
    link_path: Annotated[str, StringConstraints(min_length=1)]
    query_string: dict[UrlText, QueryValue | list[QueryValue]] | None = None
    path_variables: dict[UrlText, PathValue] | None = None


class Domain:
    """A named collection of resources served from one host.

    Usage::

        domain = Domain({
            "name": "api.runrightfast.co",
            "useHttps": True,
            "resources": [applications_record],
        })
        domain.resource_data_href("applications", 1)
        # "https://api.runrightfast.co/data/v1/applications"

    Raises:
        ValidationError: If the record or anything nested in it is malformed.
        DuplicateKeyError: If two resources share ``(name, version)``, or a
            resource repeats an action name or link rel.
    """

    def __init__(self, record: Mapping[str, Any] | DomainRecord) -> None:
        parsed = validate_record(DomainRecord, record, entity="domain")
        resources = index_unique(
            (Resource(r) for r in parsed.resources),
            attrgetter("key"),
            what="resource keys (name/version)",
        )

        self._name = parsed.name
        self._description = parsed.description
        self._use_https = parsed.use_https
        self._port = parsed.port
        self._resources: dict[ResourceKey, Resource] = resources
        logger.debug("Constructed domain %s with %d resources", self._name, len(resources))

    # --- Settings ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def use_https(self) -> bool:
        return self._use_https

    @property
    def port(self) -> int | None:
        return self._port

    @property
    def base_url(self) -> str:
        """``scheme://name[:port]`` for every href in this domain."""
        return base_url(self._name, use_https=self._use_https, port=self._port)

    # --- Resources ---

    @property
    def resources(self) -> Mapping[ResourceKey, Resource]:
        return MappingProxyType(self._resources)

    def resource(self, name: str, version: int) -> Resource | None:
        """Return the resource keyed by ``(name, version)``, or None."""
        return self._resources.get(ResourceKey(name, version))

    def resource_names(self) -> frozenset[ResourceKey]:
        """Return the keys of every indexed resource."""
        return frozenset(self._resources)

    def add_resource(self, record: Mapping[str, Any] | ResourceRecord) -> Resource:
        """Validate and index a new resource.

        Raises:
            AlreadyExistsError: If ``(name, version)`` is already indexed.
        """
        resource = Resource(record)
        key = resource.key
        if key in self._resources:
            raise AlreadyExistsError("resource", str(key))
        self._resources[key] = resource
        logger.debug("Added resource %s to domain %s", key, self._name)
        return resource

    def set_resource(self, record: Mapping[str, Any] | ResourceRecord) -> Resource:
        """Validate and index a resource, replacing any with the same key."""
        resource = Resource(record)
        key = resource.key
        self._resources[key] = resource
        logger.debug("Set resource %s on domain %s", key, self._name)
        return resource

    def remove_resource(self, name: str, version: int) -> Resource | None:
        """Remove a resource. Unknown keys are a no-op."""
        return self._resources.pop(ResourceKey(name, version), None)

    def _require(self, name: str, version: int) -> Resource:
        resource = self.resource(name, version)
        if resource is None:
            raise ResourceNotFoundError(name, version)
        return resource

    # --- Hrefs ---

    def resource_href(
        self,
        name: str,
        version: int,
        href_type: HrefType | str = HrefType.DATA,
    ) -> str:
        """``scheme://name[:port]/{href_type}/v{version}/{resource}``.

        Raises:
            ValidationError: If the parameters are malformed (e.g. an
                *href_type* other than data, schema, or service).
            ResourceNotFoundError: If no such resource is indexed.
        """
        params = validate_record(
            ResourceHrefParams,
            {"name": name, "version": version, "href_type": href_type},
            entity="resource href parameters",
        )
        resource = self._require(params.name, params.version)
        return self.base_url + resource.path(params.href_type)

    def resource_data_href(self, name: str, version: int) -> str:
        return self.resource_href(name, version, HrefType.DATA)

    def resource_schema_href(self, name: str, version: int) -> str:
        return self.resource_href(name, version, HrefType.SCHEMA)

    def resource_action_href(
        self,
        name: str,
        version: int,
        action: str,
        href_type: HrefType | str = HrefType.DATA,
    ) -> str:
        """Resource href with the sub-path of *action* appended.

        Raises:
            UnknownActionError: If the resource does not declare *action*.
        """
        params = validate_record(
            ResourceHrefParams,
            {"name": name, "version": version, "href_type": href_type},
            entity="resource href parameters",
        )
        resource = self._require(params.name, params.version)
        return self.base_url + resource.path(params.href_type, action)

    def resource_link_href(
        self,
        name: str,
        version: int,
        link_path: str,
        query_string: Mapping[str, Any] | None = None,
        path_variables: Mapping[str, Any] | None = None,
    ) -> str:
        """Build a ``ResourceLink.href`` under the resource's data href.

        ``{data href}{/link_path}[?{query}]`` with ``{placeholders}``
        substituted from *path_variables* once the query is encoded.

        Raises:
            ValidationError: If the parameters are malformed.
            ResourceNotFoundError: If no such resource is indexed.
        """
        params = validate_record(
            ResourceLinkHrefParams,
            {
                "name": name,
                "version": version,
                "link_path": link_path,
                "query_string": query_string,
                "path_variables": path_variables,
            },
            entity="resource link href parameters",
        )
        resource = self._require(params.name, params.version)
        href = self.base_url + resource.path(HrefType.DATA) + normalize_path(params.link_path)
        # An empty query mapping adds no trailing "?".
        if params.query_string:
            href += "?" + encode_query(params.query_string)
        if params.path_variables:
            href = substitute_path_variables(href, params.path_variables)
        return href

    # --- Serialization ---

    def to_record(self) -> dict[str, Any]:
        """Return the domain in document form."""
        record: dict[str, Any] = {"name": self._name}
        if self._description is not None:
            record["description"] = self._description
        record["useHttps"] = self._use_https
        if self._port is not None:
            record["port"] = self._port
        record["resources"] = [r.to_record() for r in self._resources.values()]
        return record

    def __repr__(self) -> str:
        keys = sorted(str(k) for k in self._resources)
        return f"Domain(name={self._name!r}, resources={keys!r})"
