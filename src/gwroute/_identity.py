"""Group/kind/name identity keys for route resources.

Group and kind are static per resource type (the ``GROUP`` and ``KIND`` class
constants); only the name, and later the namespace, come from the instance.
Keys are used by the index for lookups and cross-references, never for
ownership.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Protocol

from gwroute.api import GatewayHttpRoute, PolicyHttpRoute

if TYPE_CHECKING:
    from gwroute.api import ObjectMeta


class ResourceType(Protocol):
    """A resource class carrying its static API group and kind."""

    GROUP: ClassVar[str]
    KIND: ClassVar[str]


class Resource(ResourceType, Protocol):
    metadata: ObjectMeta


@dataclass(frozen=True, slots=True)
class GroupKindName:
    group: str
    kind: str
    name: str

    def namespaced(self, namespace: str) -> GroupKindNamespaceName:
        return GroupKindNamespaceName(
            group=self.group,
            kind=self.kind,
            namespace=namespace,
            name=self.name,
        )


@dataclass(frozen=True, slots=True)
class GroupKindNamespaceName:
    group: str
    kind: str
    namespace: str
    name: str

    def __str__(self) -> str:
        return f"{self.kind}.{self.group}:{self.namespace}/{self.name}"


def gkn_for(resource_type: type[ResourceType], name: str) -> GroupKindName:
    """Build the key for a resource of the given type by name alone."""
    return GroupKindName(group=resource_type.GROUP, kind=resource_type.KIND, name=name)


def gkn_for_resource(resource: Resource) -> GroupKindName:
    """Build the key for a resource instance from its type and declared name."""
    return gkn_for(type(resource), resource.metadata.name)


def gkn_for_gateway_http_route(name: str) -> GroupKindName:
    return gkn_for(GatewayHttpRoute, name)


def gkn_for_policy_http_route(name: str) -> GroupKindName:
    return gkn_for(PolicyHttpRoute, name)
