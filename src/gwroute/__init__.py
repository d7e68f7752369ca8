"""gwroute — canonical HTTP route model for Gateway API-style HTTPRoutes.

Converts HTTPRoute resources from either the Gateway API group or the policy
group's mirror into one schema-agnostic model. All public types are exported
from this module for flat imports:

    from gwroute import HttpRouteResource, convert_route

Wire schema types live in ``gwroute.api``.
"""

__version__ = "0.1.0"

# Errors
from gwroute._errors import (
    InvalidHeaderNameError,
    InvalidHeaderValueError,
    InvalidMethodError,
    InvalidRegexError,
    InvalidRouteError,
    InvalidStatusCodeError,
    MissingNamespaceError,
    NonAbsolutePathError,
    ParseError,
    RouteError,
    UnsupportedFilterError,
    UnsupportedSchemeError,
)

# Identity
from gwroute._identity import (
    GroupKindName,
    GroupKindNamespaceName,
    gkn_for,
    gkn_for_gateway_http_route,
    gkn_for_policy_http_route,
    gkn_for_resource,
)

# Route adapter
from gwroute._resource import HttpRouteResource

# Canonical model
from gwroute._routes import (
    FullPath,
    HeaderExact,
    HeaderMatch,
    HeaderModifierFilter,
    HeaderRegex,
    HostExact,
    HostMatch,
    HostSuffix,
    HttpRoute,
    HttpRouteFilter,
    HttpRouteMatch,
    HttpRouteRule,
    PathExact,
    PathMatch,
    PathModifier,
    PathPrefix,
    PathRegex,
    PrefixPath,
    QueryParamExact,
    QueryParamMatch,
    QueryParamRegex,
    RequestHeaderModifier,
    RequestRedirect,
    RequestRedirectFilter,
    ResponseHeaderModifier,
)

# Validated primitives
from gwroute._tokens import HeaderName, HeaderValue, Regex, Scheme

# Conversion
from gwroute._convert import (
    DEFAULT_MATCH,
    convert_filter,
    convert_route,
    convert_rule,
    header_match,
    header_modifier,
    host_match,
    method_match,
    path_match,
    path_modifier,
    query_param_match,
    req_redirect,
    try_match,
)

__all__ = [
    # Errors
    "RouteError",
    "ParseError",
    "InvalidRouteError",
    "NonAbsolutePathError",
    "InvalidHeaderNameError",
    "InvalidHeaderValueError",
    "InvalidMethodError",
    "InvalidRegexError",
    "InvalidStatusCodeError",
    "UnsupportedSchemeError",
    "UnsupportedFilterError",
    "MissingNamespaceError",
    # Identity
    "GroupKindName",
    "GroupKindNamespaceName",
    "gkn_for",
    "gkn_for_resource",
    "gkn_for_gateway_http_route",
    "gkn_for_policy_http_route",
    # Route adapter
    "HttpRouteResource",
    # Validated primitives
    "HeaderName",
    "HeaderValue",
    "Regex",
    "Scheme",
    # Matches
    "PathExact",
    "PathPrefix",
    "PathRegex",
    "PathMatch",
    "HeaderExact",
    "HeaderRegex",
    "HeaderMatch",
    "QueryParamExact",
    "QueryParamRegex",
    "QueryParamMatch",
    "HostExact",
    "HostSuffix",
    "HostMatch",
    "HttpRouteMatch",
    # Filters
    "HeaderModifierFilter",
    "RequestRedirectFilter",
    "FullPath",
    "PrefixPath",
    "PathModifier",
    "RequestHeaderModifier",
    "ResponseHeaderModifier",
    "RequestRedirect",
    "HttpRouteFilter",
    # Rules and routes
    "HttpRouteRule",
    "HttpRoute",
    "DEFAULT_MATCH",
    # Conversion
    "path_match",
    "host_match",
    "header_match",
    "query_param_match",
    "method_match",
    "try_match",
    "header_modifier",
    "req_redirect",
    "path_modifier",
    "convert_filter",
    "convert_rule",
    "convert_route",
]
