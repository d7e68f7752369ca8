"""Canonical route model — schema-agnostic matches, filters and rules.

Every type here is a frozen dataclass built once per conversion. None of them
refer back to the resource they were converted from, so two conversions of
the same resource version compare equal.

The union aliases are pattern-matchable via match/case:

    match route_match.path:
        case PathPrefix(value=prefix): ...
        case PathRegex(regex=regex): ...
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from http import HTTPMethod

    from gwroute._tokens import HeaderName, HeaderValue, Regex, Scheme

# ═══════════════════════════════════════════════════════════════════════════════
# Matches
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class PathExact:
    """The request path must equal value exactly."""

    value: str


@dataclass(frozen=True, slots=True)
class PathPrefix:
    """The request path must start with value."""

    value: str


@dataclass(frozen=True, slots=True)
class PathRegex:
    regex: Regex


type PathMatch = PathExact | PathPrefix | PathRegex


@dataclass(frozen=True, slots=True)
class HeaderExact:
    name: HeaderName
    value: HeaderValue


@dataclass(frozen=True, slots=True)
class HeaderRegex:
    name: HeaderName
    regex: Regex


type HeaderMatch = HeaderExact | HeaderRegex


@dataclass(frozen=True, slots=True)
class QueryParamExact:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class QueryParamRegex:
    name: str
    regex: Regex


type QueryParamMatch = QueryParamExact | QueryParamRegex


@dataclass(frozen=True, slots=True)
class HostExact:
    hostname: str


@dataclass(frozen=True, slots=True)
class HostSuffix:
    """Wildcard host match.

    ``*.example.com`` is stored as ``("com", "example")``: labels ordered from
    the outermost inward, wildcard label dropped.
    """

    reverse_labels: tuple[str, ...]


type HostMatch = HostExact | HostSuffix


@dataclass(frozen=True, slots=True)
class HttpRouteMatch:
    """All conditions of a single match, ANDed together.

    Absent conditions are None (path, method) or empty (headers, query
    params); an empty match accepts every request.
    """

    path: PathMatch | None = None
    headers: tuple[HeaderMatch, ...] = ()
    query_params: tuple[QueryParamMatch, ...] = ()
    method: HTTPMethod | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HeaderModifierFilter:
    """Header edits applied in order: set, add, then remove."""

    add: tuple[tuple[HeaderName, HeaderValue], ...] = ()
    set: tuple[tuple[HeaderName, HeaderValue], ...] = ()
    remove: frozenset[HeaderName] = field(default_factory=frozenset)


@dataclass(frozen=True, slots=True)
class FullPath:
    """Replace the whole request path."""

    path: str


@dataclass(frozen=True, slots=True)
class PrefixPath:
    """Replace the matched path prefix."""

    path: str


type PathModifier = FullPath | PrefixPath


@dataclass(frozen=True, slots=True)
class RequestRedirectFilter:
    """Redirect response description. Unset fields keep the request's value."""

    scheme: Scheme | None = None
    host: str | None = None
    path: PathModifier | None = None
    port: int | None = None
    status: int | None = None


@dataclass(frozen=True, slots=True)
class RequestHeaderModifier:
    filter: HeaderModifierFilter


@dataclass(frozen=True, slots=True)
class ResponseHeaderModifier:
    filter: HeaderModifierFilter


@dataclass(frozen=True, slots=True)
class RequestRedirect:
    filter: RequestRedirectFilter


type HttpRouteFilter = RequestHeaderModifier | ResponseHeaderModifier | RequestRedirect

# ═══════════════════════════════════════════════════════════════════════════════
# Rules and routes
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpRouteRule:
    """Matches are ORed; filters apply in declaration order."""

    matches: tuple[HttpRouteMatch, ...]
    filters: tuple[HttpRouteFilter, ...] = ()


@dataclass(frozen=True, slots=True)
class HttpRoute:
    hostnames: tuple[HostMatch, ...]
    rules: tuple[HttpRouteRule, ...]
