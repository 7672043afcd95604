"""Resource — a named, versioned collection of actions and links.

A resource is validated once at construction and afterwards mutated only
through the ``add_*`` / ``set_*`` / ``remove_*`` methods, each of which
preserves the uniqueness of action names and link rels.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from operator import attrgetter
from types import MappingProxyType
from typing import Annotated, Any, NamedTuple

from pydantic import BaseModel, Field, StrictInt, StringConstraints

from apimodel.domain.actions import ResourceAction
from apimodel.domain.errors import AlreadyExistsError, UnknownActionError
from apimodel.domain.hrefs import resource_path
from apimodel.domain.links import ResourceLink
from apimodel.domain.shapes import ObjectShapeReference
from apimodel.domain.types import HrefType
from apimodel.domain.validation import RECORD_CONFIG, index_unique, validate_record

logger = logging.getLogger(__name__)


class ResourceKey(NamedTuple):
    """Composite identity of a resource within a domain."""

    name: str
    version: int

    def __str__(self) -> str:
        return f"{self.name}/{self.version}"


class ResourceRecord(BaseModel):
    """Declarative shape of a resource, before indexing."""

    model_config = RECORD_CONFIG

    name: Annotated[str, StringConstraints(min_length=1)]
    version: Annotated[StrictInt, Field(ge=1)]
    object_shape: ObjectShapeReference
    description: str | None = None
    tags: tuple[str, ...] = ()
    actions: tuple[ResourceAction, ...] = ()
    links: tuple[ResourceLink, ...] = ()


class Resource:
    """A resource identified by ``(name, version)`` within its domain.

    Usage::

        resource = Resource({
            "name": "applications",
            "version": 1,
            "objectShape": {"namespace": "ns://runrightfast.co/applications",
                            "version": "1.0.0", "type": "Application"},
            "actions": [{"name": "delete", "title": "Delete",
                         "method": "DELETE", "path": "{id}"}],
        })
        resource.path("data", "delete")  # "/data/v1/applications/{id}"

    Raises:
        ValidationError: If the record or any nested action/link is malformed.
        DuplicateKeyError: If action names or link rels are not unique.
    """

    def __init__(self, record: Mapping[str, Any] | ResourceRecord) -> None:
        parsed = validate_record(ResourceRecord, record, entity="resource")
        actions = index_unique(parsed.actions, attrgetter("name"), what="action names")
        links = index_unique(parsed.links, attrgetter("rel"), what="link rels")

        self._name = parsed.name
        self._version = parsed.version
        self._object_shape = parsed.object_shape
        self._description = parsed.description
        self._tags = frozenset(parsed.tags)
        self._actions: dict[str, ResourceAction] = actions
        self._links: dict[str, ResourceLink] = links

    # --- Identity and metadata ---

    @property
    def name(self) -> str:
        return self._name

    @property
    def version(self) -> int:
        return self._version

    @property
    def key(self) -> ResourceKey:
        return ResourceKey(self._name, self._version)

    @property
    def object_shape(self) -> ObjectShapeReference:
        return self._object_shape

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def tags(self) -> frozenset[str]:
        return self._tags

    @property
    def actions(self) -> Mapping[str, ResourceAction]:
        """Read-only view of actions keyed by name."""
        return MappingProxyType(self._actions)

    @property
    def links(self) -> Mapping[str, ResourceLink]:
        """Read-only view of links keyed by rel."""
        return MappingProxyType(self._links)

    def action_names(self) -> list[str]:
        return list(self._actions)

    def link_rels(self) -> list[str]:
        return list(self._links)

    # --- Actions ---

    def action(self, name: str) -> ResourceAction | None:
        """Return the action named *name*, or None if it is not declared."""
        return self._actions.get(name)

    def add_action(self, record: Mapping[str, Any] | ResourceAction) -> ResourceAction:
        """Validate and insert a new action.

        Raises:
            AlreadyExistsError: If an action with the same name exists.
        """
        action = ResourceAction.from_record(record)
        if action.name in self._actions:
            raise AlreadyExistsError("action", action.name)
        self._actions[action.name] = action
        logger.debug("Added action %s to %s/%s", action.name, self._name, self._version)
        return action

    def set_action(self, record: Mapping[str, Any] | ResourceAction) -> ResourceAction:
        """Validate and insert an action, replacing any with the same name."""
        action = ResourceAction.from_record(record)
        self._actions[action.name] = action
        logger.debug("Set action %s on %s/%s", action.name, self._name, self._version)
        return action

    def remove_action(self, name: str) -> ResourceAction | None:
        """Remove the action named *name*. Missing names are a no-op."""
        return self._actions.pop(name, None)

    # --- Links ---

    def link(self, rel: str) -> ResourceLink | None:
        """Return the link with relation *rel*, or None if it is not declared."""
        return self._links.get(rel)

    def add_link(self, record: Mapping[str, Any] | ResourceLink) -> ResourceLink:
        """Validate and insert a new link.

        Raises:
            AlreadyExistsError: If a link with the same rel exists.
        """
        link = ResourceLink.from_record(record)
        if link.rel in self._links:
            raise AlreadyExistsError("link", link.rel)
        self._links[link.rel] = link
        logger.debug("Added link %s to %s/%s", link.rel, self._name, self._version)
        return link

    def set_link(self, record: Mapping[str, Any] | ResourceLink) -> ResourceLink:
        """Validate and insert a link, replacing any with the same rel."""
        link = ResourceLink.from_record(record)
        self._links[link.rel] = link
        logger.debug("Set link %s on %s/%s", link.rel, self._name, self._version)
        return link

    def remove_link(self, rel: str) -> ResourceLink | None:
        """Remove the link with relation *rel*. Missing rels are a no-op."""
        return self._links.pop(rel, None)

    # --- Paths ---

    def path(self, href_type: HrefType | str, action: str | None = None) -> str:
        """Return ``/{href_type}/v{version}/{name}``, plus the action sub-path.

        Raises:
            UnknownActionError: If *action* is given but not declared.
        """
        path = resource_path(str(href_type), self._version, self._name)
        if action is not None:
            resource_action = self.action(action)
            if resource_action is None:
                raise UnknownActionError(f"{self._name}/{self._version}", action)
            path += resource_action.path
        return path

    # --- Serialization ---

    def to_record(self) -> dict[str, Any]:
        """Return the resource in document form."""
        record: dict[str, Any] = {
            "name": self._name,
            "version": self._version,
            "objectShape": self._object_shape.to_record(),
        }
        if self._description is not None:
            record["description"] = self._description
        record["tags"] = sorted(self._tags)
        record["actions"] = [a.to_record() for a in self._actions.values()]
        record["links"] = [link.to_record() for link in self._links.values()]
        return record

    def __repr__(self) -> str:
        return (
            f"Resource(name={self._name!r}, version={self._version}, "
            f"actions={self.action_names()!r}, links={self.link_rels()!r})"
        )
