"""Conversion of HTTPRoute wire types into the canonical route model.

Every converter is a pure function of its input. Failures raise a RouteError
subclass and abort the whole conversion they are part of: the first invalid
field wins and no partial result is returned.

    HttpRouteResource → convert_route() → HttpRoute
        rules → convert_rule() → try_match() / convert_filter()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from gwroute._errors import (
    NonAbsolutePathError,
    RouteError,
    UnsupportedFilterError,
)
from gwroute._routes import (
    FullPath,
    HeaderExact,
    HeaderModifierFilter,
    HeaderRegex,
    HostExact,
    HostSuffix,
    HttpRoute,
    HttpRouteMatch,
    HttpRouteRule,
    PathExact,
    PathPrefix,
    PathRegex,
    PrefixPath,
    QueryParamExact,
    QueryParamRegex,
    RequestHeaderModifier,
    RequestRedirect,
    RequestRedirectFilter,
    ResponseHeaderModifier,
)
from gwroute._tokens import (
    HeaderName,
    HeaderValue,
    Regex,
    parse_method,
    parse_scheme,
    parse_status_code,
)
from gwroute.api import (
    ReplaceFullPath,
    ReplacePrefixMatch,
    RequestHeaderModifierFilter,
    ResponseHeaderModifierFilter,
    UnsupportedFilter,
)
from gwroute.api import RequestRedirectFilter as WireRequestRedirectFilter

if TYPE_CHECKING:
    from http import HTTPMethod

    from gwroute import api
    from gwroute._resource import HttpRouteResource
    from gwroute._routes import (
        HeaderMatch,
        HostMatch,
        HttpRouteFilter,
        PathMatch,
        PathModifier,
        QueryParamMatch,
    )

logger = structlog.get_logger(__name__)

MIN_PORT = 1
MAX_PORT = 65535

# Gateway API: a rule without matches matches every request.
DEFAULT_MATCH = HttpRouteMatch(path=PathPrefix("/"))

# ═══════════════════════════════════════════════════════════════════════════════
# Matches
# ═══════════════════════════════════════════════════════════════════════════════


def path_match(path: api.HttpPathMatch) -> PathMatch:
    """Convert a path match.

    Raises:
        NonAbsolutePathError: If an Exact or PathPrefix value lacks a leading '/'.
        InvalidRegexError: If a RegularExpression value does not compile.
    """
    match path.type:
        case "Exact" | "PathPrefix" if not path.value.startswith("/"):
            raise NonAbsolutePathError("HttpPathMatch path", path.value)
        case "Exact":
            return PathExact(path.value)
        case "PathPrefix":
            return PathPrefix(path.value)
        case "RegularExpression":
            return PathRegex(Regex(path.value))
        case _:
            msg = f"Unknown path match type: {path.type}"
            raise ValueError(msg)


def host_match(hostname: str) -> HostMatch:
    """Convert a route hostname. Never fails; DNS validation is the caller's."""
    if hostname.startswith("*."):
        reverse_labels = hostname.split(".")[1:]
        reverse_labels.reverse()
        return HostSuffix(tuple(reverse_labels))
    return HostExact(hostname)


def header_match(header: api.HttpHeaderMatch) -> HeaderMatch:
    """Convert a header match.

    Raises:
        InvalidHeaderNameError: If the name is not a valid token.
        InvalidHeaderValueError: If an Exact value is not a valid field value.
        InvalidRegexError: If a RegularExpression value does not compile.
    """
    match header.type:
        case "Exact":
            return HeaderExact(HeaderName(header.name), HeaderValue(header.value))
        case "RegularExpression":
            return HeaderRegex(HeaderName(header.name), Regex(header.value))
        case _:
            msg = f"Unknown header match type: {header.type}"
            raise ValueError(msg)


def query_param_match(query: api.HttpQueryParamMatch) -> QueryParamMatch:
    """Convert a query param match. Exact names and values are kept verbatim.

    Raises:
        InvalidRegexError: If a RegularExpression value does not compile.
    """
    match query.type:
        case "Exact":
            return QueryParamExact(query.name, query.value)
        case "RegularExpression":
            return QueryParamRegex(query.name, Regex(query.value))
        case _:
            msg = f"Unknown query param match type: {query.type}"
            raise ValueError(msg)


def method_match(method: str) -> HTTPMethod:
    """Convert a method token.

    Raises:
        InvalidMethodError: If the token is not a standard HTTP method.
    """
    return parse_method(method)


def try_match(route_match: api.HttpRouteMatch) -> HttpRouteMatch:
    """Convert one HttpRouteMatch, failing on its first invalid condition."""
    path = path_match(route_match.path) if route_match.path is not None else None
    headers = tuple(header_match(h) for h in route_match.headers or ())
    query_params = tuple(query_param_match(q) for q in route_match.query_params or ())
    method = method_match(route_match.method) if route_match.method is not None else None
    return HttpRouteMatch(
        path=path,
        headers=headers,
        query_params=query_params,
        method=method,
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


def header_modifier(modifier: api.HttpRequestHeaderFilter) -> HeaderModifierFilter:
    """Convert header edits; absent lists become empty.

    Raises:
        InvalidHeaderNameError: If any name is not a valid token.
        InvalidHeaderValueError: If any value is not a valid field value.
    """
    return HeaderModifierFilter(
        add=tuple((HeaderName(h.name), HeaderValue(h.value)) for h in modifier.add or ()),
        set=tuple((HeaderName(h.name), HeaderValue(h.value)) for h in modifier.set or ()),
        remove=frozenset(HeaderName(name) for name in modifier.remove or ()),
    )


def req_redirect(redirect: api.HttpRequestRedirectFilter) -> RequestRedirectFilter:
    """Convert a redirect.

    Ports outside 1-65535 are dropped: the redirect keeps the request's port.

    Raises:
        UnsupportedSchemeError: If the scheme is not http or https.
        NonAbsolutePathError: If the path modifier is not absolute.
        InvalidStatusCodeError: If the status code is outside 100-999.
    """
    port = redirect.port
    if port is not None and not MIN_PORT <= port <= MAX_PORT:
        logger.debug("Dropping out-of-range redirect port", port=port)
        port = None
    return RequestRedirectFilter(
        scheme=parse_scheme(redirect.scheme) if redirect.scheme is not None else None,
        host=redirect.hostname,
        path=path_modifier(redirect.path) if redirect.path is not None else None,
        port=port,
        status=(
            parse_status_code(redirect.status_code)
            if redirect.status_code is not None
            else None
        ),
    )


def path_modifier(modifier: api.HttpPathModifier) -> PathModifier:
    """Convert a redirect path modifier.

    Raises:
        NonAbsolutePathError: If the replacement path lacks a leading '/'.
    """
    match modifier:
        case ReplaceFullPath(replace_full_path=path) | ReplacePrefixMatch(
            replace_prefix_match=path
        ) if not path.startswith("/"):
            raise NonAbsolutePathError("RequestRedirect path", path)
        case ReplaceFullPath(replace_full_path=path):
            return FullPath(path)
        case ReplacePrefixMatch(replace_prefix_match=path):
            return PrefixPath(path)
    msg = f"Unknown path modifier: {modifier!r}"  # pragma: no cover
    raise ValueError(msg)  # pragma: no cover


def convert_filter(route_filter: api.HttpRouteFilter) -> HttpRouteFilter:
    """Convert a rule filter.

    Raises:
        UnsupportedFilterError: For mirror, rewrite and extension filters.
    """
    match route_filter:
        case RequestHeaderModifierFilter(request_header_modifier=modifier):
            return RequestHeaderModifier(header_modifier(modifier))
        case ResponseHeaderModifierFilter(response_header_modifier=modifier):
            return ResponseHeaderModifier(header_modifier(modifier))
        case WireRequestRedirectFilter(request_redirect=redirect):
            return RequestRedirect(req_redirect(redirect))
        case UnsupportedFilter(type=type_):
            raise UnsupportedFilterError(type_)
    msg = f"Unknown filter: {route_filter!r}"  # pragma: no cover
    raise ValueError(msg)  # pragma: no cover


# ═══════════════════════════════════════════════════════════════════════════════
# Rules and routes
# ═══════════════════════════════════════════════════════════════════════════════


def convert_rule(rule: api.HttpRouteRule) -> HttpRouteRule:
    """Convert a rule. A rule without matches gets DEFAULT_MATCH."""
    matches = tuple(try_match(m) for m in rule.matches or ())
    return HttpRouteRule(
        matches=matches or (DEFAULT_MATCH,),
        filters=tuple(convert_filter(f) for f in rule.filters or ()),
    )


def convert_route(resource: HttpRouteResource) -> HttpRoute:
    """Convert a whole route resource.

    Raises:
        RouteError: The first conversion failure in any hostname or rule.
        MissingNamespaceError: If the resource has no namespace.
    """
    gknn = resource.gknn()
    try:
        route = HttpRoute(
            hostnames=tuple(host_match(h) for h in resource.hostnames()),
            rules=tuple(convert_rule(r) for r in resource.rules()),
        )
    except RouteError as e:
        logger.warning("Invalid HTTPRoute", route=str(gknn), error=str(e))
        raise
    logger.debug("Converted HTTPRoute", route=str(gknn), rules=len(route.rules))
    return route
