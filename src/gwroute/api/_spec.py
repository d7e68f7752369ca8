"""Wire types mirroring the Gateway API HTTPRoute spec.

Pure Python types (no k8s client dependency). Both route schemas share these
shapes; they differ only in API group and served versions.

Every field the wire format allows to be omitted is ``None`` here, so "absent"
and "present but empty" stay distinguishable until conversion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

# ═══════════════════════════════════════════════════════════════════════════════
# Metadata and status
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class ObjectMeta:
    """The subset of Kubernetes object metadata routes need."""

    name: str
    namespace: str | None = None
    resource_version: str | None = None
    generation: int | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ParentReference:
    """A Gateway, Service or Server the route attaches to."""

    name: str
    group: str | None = None
    kind: str | None = None
    namespace: str | None = None
    section_name: str | None = None
    port: int | None = None


@dataclass(frozen=True, slots=True)
class CommonRouteSpec:
    parent_refs: tuple[ParentReference, ...] | None = None


@dataclass(frozen=True, slots=True)
class Condition:
    type: str
    status: Literal["True", "False", "Unknown"]
    reason: str
    message: str = ""
    last_transition_time: str | None = None
    observed_generation: int | None = None


@dataclass(frozen=True, slots=True)
class RouteParentStatus:
    parent_ref: ParentReference
    controller_name: str
    conditions: tuple[Condition, ...] = ()


@dataclass(frozen=True, slots=True)
class RouteStatus:
    parents: tuple[RouteParentStatus, ...] = ()


# ═══════════════════════════════════════════════════════════════════════════════
# Matches
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpPathMatch:
    """Gateway API path match specification."""

    type: Literal["Exact", "PathPrefix", "RegularExpression"]
    value: str


@dataclass(frozen=True, slots=True)
class HttpHeaderMatch:
    """Gateway API header match specification."""

    type: Literal["Exact", "RegularExpression"]
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class HttpQueryParamMatch:
    """Gateway API query parameter match specification."""

    type: Literal["Exact", "RegularExpression"]
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class HttpRouteMatch:
    """Gateway API HttpRouteMatch.

    All conditions within a single HttpRouteMatch are ANDed together.
    Multiple HttpRouteMatch entries in a rule are ORed.
    """

    path: HttpPathMatch | None = None
    headers: tuple[HttpHeaderMatch, ...] | None = None
    query_params: tuple[HttpQueryParamMatch, ...] | None = None
    method: str | None = None


# ═══════════════════════════════════════════════════════════════════════════════
# Filters
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpHeader:
    name: str
    value: str


@dataclass(frozen=True, slots=True)
class HttpRequestHeaderFilter:
    """Header edits; used for both request and response modifiers."""

    set: tuple[HttpHeader, ...] | None = None
    add: tuple[HttpHeader, ...] | None = None
    remove: tuple[str, ...] | None = None


@dataclass(frozen=True, slots=True)
class ReplaceFullPath:
    replace_full_path: str


@dataclass(frozen=True, slots=True)
class ReplacePrefixMatch:
    replace_prefix_match: str


type HttpPathModifier = ReplaceFullPath | ReplacePrefixMatch


@dataclass(frozen=True, slots=True)
class HttpRequestRedirectFilter:
    scheme: str | None = None
    hostname: str | None = None
    path: HttpPathModifier | None = None
    port: int | None = None
    status_code: int | None = None


@dataclass(frozen=True, slots=True)
class RequestHeaderModifierFilter:
    request_header_modifier: HttpRequestHeaderFilter


@dataclass(frozen=True, slots=True)
class ResponseHeaderModifierFilter:
    response_header_modifier: HttpRequestHeaderFilter


@dataclass(frozen=True, slots=True)
class RequestRedirectFilter:
    request_redirect: HttpRequestRedirectFilter


@dataclass(frozen=True, slots=True)
class UnsupportedFilter:
    """A filter kind the wire format allows but routes cannot express.

    The raw filter body is kept so errors can name it.
    """

    type: str
    config: dict[str, Any] = field(default_factory=dict)


type HttpRouteFilter = (
    RequestHeaderModifierFilter
    | ResponseHeaderModifierFilter
    | RequestRedirectFilter
    | UnsupportedFilter
)

# ═══════════════════════════════════════════════════════════════════════════════
# Rules and spec
# ═══════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True, slots=True)
class HttpRouteRule:
    matches: tuple[HttpRouteMatch, ...] | None = None
    filters: tuple[HttpRouteFilter, ...] | None = None


@dataclass(frozen=True, slots=True)
class HttpRouteSpec:
    inner: CommonRouteSpec = field(default_factory=CommonRouteSpec)
    hostnames: tuple[str, ...] | None = None
    rules: tuple[HttpRouteRule, ...] | None = None
