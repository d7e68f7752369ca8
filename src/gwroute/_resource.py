"""HttpRouteResource — one view over both HTTPRoute schemas.

Consumers read names, namespaces, specs, status and identity keys through
this façade and never branch on the schema. It performs no validation beyond
the namespace precondition; conversion happens in gwroute._convert.

Supporting another schema means adding a variant to HttpRouteVariant and a
case to each accessor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from gwroute._errors import MissingNamespaceError
from gwroute._identity import gkn_for_resource
from gwroute.api import GatewayHttpRoute, PolicyHttpRoute, parse_http_route

if TYPE_CHECKING:
    from gwroute._identity import GroupKindNamespaceName
    from gwroute.api import (
        CommonRouteSpec,
        HttpRouteRule,
        HttpRouteVariant,
        RouteStatus,
    )


@dataclass(frozen=True, slots=True)
class HttpRouteResource:
    route: HttpRouteVariant

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HttpRouteResource:
        """Parse a raw object of either schema.

        Raises:
            ParseError: If the object is not a well-formed HTTPRoute.
        """
        return cls(parse_http_route(data))

    def name(self) -> str:
        match self.route:
            case GatewayHttpRoute(metadata=meta) | PolicyHttpRoute(metadata=meta):
                return meta.name

    def namespace(self) -> str:
        """The route's namespace.

        Raises:
            MissingNamespaceError: If the object has none. HTTPRoutes are
                namespaced, so this means the object did not come from the
                API server intact.
        """
        match self.route:
            case GatewayHttpRoute(metadata=meta) | PolicyHttpRoute(metadata=meta):
                if meta.namespace is None:
                    raise MissingNamespaceError(self.route.KIND, meta.name)
                return meta.namespace

    def inner(self) -> CommonRouteSpec:
        match self.route:
            case GatewayHttpRoute(spec=spec) | PolicyHttpRoute(spec=spec):
                return spec.inner

    def status(self) -> RouteStatus | None:
        match self.route:
            case GatewayHttpRoute(status=status) | PolicyHttpRoute(status=status):
                return status

    def hostnames(self) -> tuple[str, ...]:
        match self.route:
            case GatewayHttpRoute(spec=spec) | PolicyHttpRoute(spec=spec):
                return spec.hostnames or ()

    def rules(self) -> tuple[HttpRouteRule, ...]:
        match self.route:
            case GatewayHttpRoute(spec=spec) | PolicyHttpRoute(spec=spec):
                return spec.rules or ()

    def gknn(self) -> GroupKindNamespaceName:
        """The namespaced identity key of this route."""
        return gkn_for_resource(self.route).namespaced(self.namespace())
