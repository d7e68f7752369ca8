"""The two HTTPRoute resource variants.

Both carry the same spec and status shapes; they differ in API group and in
the versions each group serves. GROUP, KIND and VERSIONS are type-level
constants, never read from an instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from gwroute.api._spec import HttpRouteSpec, ObjectMeta, RouteStatus


@dataclass(frozen=True, slots=True)
class GatewayHttpRoute:
    """HTTPRoute from the upstream Gateway API group."""

    GROUP: ClassVar[str] = "gateway.networking.k8s.io"
    KIND: ClassVar[str] = "HTTPRoute"
    VERSIONS: ClassVar[frozenset[str]] = frozenset({"v1alpha2", "v1beta1", "v1"})

    metadata: ObjectMeta
    spec: HttpRouteSpec
    status: RouteStatus | None = None


@dataclass(frozen=True, slots=True)
class PolicyHttpRoute:
    """HTTPRoute from the policy group's mirror of the Gateway API."""

    GROUP: ClassVar[str] = "policy.linkerd.io"
    KIND: ClassVar[str] = "HTTPRoute"
    VERSIONS: ClassVar[frozenset[str]] = frozenset(
        {"v1alpha1", "v1beta1", "v1beta2", "v1beta3"}
    )

    metadata: ObjectMeta
    spec: HttpRouteSpec
    status: RouteStatus | None = None


type HttpRouteVariant = GatewayHttpRoute | PolicyHttpRoute

ROUTE_TYPES: tuple[type[GatewayHttpRoute] | type[PolicyHttpRoute], ...] = (
    GatewayHttpRoute,
    PolicyHttpRoute,
)
