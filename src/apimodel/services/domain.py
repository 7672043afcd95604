"""DomainService — load a declarative document and answer queries about it.

Each public method maps one CLI command onto the domain model and turns
:class:`~apimodel.domain.errors.ApiModelError` into a failed
:class:`ServiceResult`. Anything else propagates.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from apimodel.domain.api import Domain
from apimodel.domain.errors import ApiModelError, ResourceNotFoundError
from apimodel.domain.types import HrefType
from apimodel.infrastructure.loader import load_domain
from apimodel.services.result import ServiceResult

logger = logging.getLogger(__name__)


class DomainService:
    """Operations over the domain declared in one document.

    The document is loaded lazily on first use and cached, so a service
    instance reflects the file as it was at that moment.
    """

    def __init__(self, document: Path) -> None:
        self._document = document
        self._domain: Domain | None = None

    @property
    def domain(self) -> Domain:
        """The loaded domain.

        Raises:
            DocumentError: If the document cannot be read or parsed.
            ValidationError: If the document is not a valid domain.
            DuplicateKeyError: If the document breaks a uniqueness rule.
        """
        if self._domain is None:
            self._domain = load_domain(self._document)
        return self._domain

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate(self) -> ServiceResult:
        op = "validate"
        try:
            domain = self.domain
        except ApiModelError as exc:
            logger.debug("Validation of %s failed: %s", self._document, exc)
            return ServiceResult.failure(op, exc)

        warnings: list[str] = []
        if not domain.resources:
            warnings.append("Domain declares no resources")
        for resource in domain.resources.values():
            if not resource.actions and not resource.links:
                warnings.append(f"Resource {resource.key} declares no actions or links")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "document": str(self._document),
                "domain": domain.name,
                "base_url": domain.base_url,
                "count": len(domain.resources),
            },
            warnings=warnings,
        )

    def list_resources(self) -> ServiceResult:
        op = "list_resources"
        try:
            domain = self.domain
        except ApiModelError as exc:
            return ServiceResult.failure(op, exc)

        items = [
            {
                "key": str(key),
                "name": resource.name,
                "version": resource.version,
                "actions": resource.action_names(),
                "links": resource.link_rels(),
                "tags": sorted(resource.tags),
            }
            for key, resource in sorted(domain.resources.items())
        ]
        return ServiceResult(ok=True, op=op, data={"count": len(items), "items": items})

    def show_resource(self, name: str, version: int) -> ServiceResult:
        op = "show_resource"
        try:
            resource = self.domain.resource(name, version)
            if resource is None:
                raise ResourceNotFoundError(name, version)
            data = resource.to_record()
            data["href"] = self.domain.resource_data_href(name, version)
        except ApiModelError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data=data)

    def href(
        self,
        name: str,
        version: int,
        *,
        href_type: HrefType | str = HrefType.DATA,
        action: str | None = None,
    ) -> ServiceResult:
        op = "href"
        try:
            if action is None:
                href = self.domain.resource_href(name, version, href_type)
            else:
                href = self.domain.resource_action_href(name, version, action, href_type)
        except ApiModelError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"href": href})

    def link_href(
        self,
        name: str,
        version: int,
        link_path: str,
        *,
        query_string: Mapping[str, Any] | None = None,
        path_variables: Mapping[str, Any] | None = None,
    ) -> ServiceResult:
        op = "link_href"
        try:
            href = self.domain.resource_link_href(
                name,
                version,
                link_path,
                query_string=query_string,
                path_variables=path_variables,
            )
        except ApiModelError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(ok=True, op=op, data={"href": href})
