"""gwroute.api — HTTPRoute wire schema.

Provides the two resource variants, the Gateway API-shaped spec and status
types they share, and the parser from raw Kubernetes objects.
"""

from gwroute.api._parse import parse_http_route
from gwroute.api._resources import (
    ROUTE_TYPES,
    GatewayHttpRoute,
    HttpRouteVariant,
    PolicyHttpRoute,
)
from gwroute.api._spec import (
    CommonRouteSpec,
    Condition,
    HttpHeader,
    HttpHeaderMatch,
    HttpPathMatch,
    HttpPathModifier,
    HttpQueryParamMatch,
    HttpRequestHeaderFilter,
    HttpRequestRedirectFilter,
    HttpRouteFilter,
    HttpRouteMatch,
    HttpRouteRule,
    HttpRouteSpec,
    ObjectMeta,
    ParentReference,
    ReplaceFullPath,
    ReplacePrefixMatch,
    RequestHeaderModifierFilter,
    RequestRedirectFilter,
    ResponseHeaderModifierFilter,
    RouteParentStatus,
    RouteStatus,
    UnsupportedFilter,
)

__all__ = [
    # Resources
    "GatewayHttpRoute",
    "PolicyHttpRoute",
    "HttpRouteVariant",
    "ROUTE_TYPES",
    # Metadata and status
    "ObjectMeta",
    "ParentReference",
    "CommonRouteSpec",
    "Condition",
    "RouteParentStatus",
    "RouteStatus",
    # Spec
    "HttpRouteSpec",
    "HttpRouteRule",
    "HttpRouteMatch",
    "HttpPathMatch",
    "HttpHeaderMatch",
    "HttpQueryParamMatch",
    # Filters
    "HttpRouteFilter",
    "HttpHeader",
    "HttpRequestHeaderFilter",
    "HttpRequestRedirectFilter",
    "HttpPathModifier",
    "ReplaceFullPath",
    "ReplacePrefixMatch",
    "RequestHeaderModifierFilter",
    "ResponseHeaderModifierFilter",
    "RequestRedirectFilter",
    "UnsupportedFilter",
    # Parsing
    "parse_http_route",
]
