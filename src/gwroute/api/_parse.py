"""Parsing raw Kubernetes objects (dict) into HTTPRoute wire types.

Accepts the JSON shape a Kubernetes API server returns for either route
group. Keys are camelCase on the wire and snake_case on the types. Unknown
keys are ignored, as a Kubernetes client ignores fields newer than its
schema; missing required fields and wrong JSON types raise ParseError.

    obj → parse_http_route() → GatewayHttpRoute | PolicyHttpRoute
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from gwroute._errors import ParseError
from gwroute.api._resources import ROUTE_TYPES
from gwroute.api._spec import (
    CommonRouteSpec,
    Condition,
    HttpHeader,
    HttpHeaderMatch,
    HttpPathMatch,
    HttpQueryParamMatch,
    HttpRequestHeaderFilter,
    HttpRequestRedirectFilter,
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

if TYPE_CHECKING:
    from collections.abc import Callable

    from gwroute.api._resources import HttpRouteVariant
    from gwroute.api._spec import HttpPathModifier, HttpRouteFilter

_PATH_MATCH_TYPES = frozenset({"Exact", "PathPrefix", "RegularExpression"})
_VALUE_MATCH_TYPES = frozenset({"Exact", "RegularExpression"})
_PATH_MODIFIER_TYPES = frozenset({"ReplaceFullPath", "ReplacePrefixMatch"})
_CONDITION_STATUSES = frozenset({"True", "False", "Unknown"})
_UNSUPPORTED_FILTER_TYPES = frozenset({"RequestMirror", "URLRewrite", "ExtensionRef"})


def parse_http_route(data: dict[str, Any]) -> HttpRouteVariant:
    """Parse a raw HTTPRoute object into the variant named by its apiVersion.

    This is the main entry point for resource loading.

    Raises:
        ParseError: If the object is not an HTTPRoute of a known group and
            served version, or is malformed.
    """
    _expect_dict(data, "object")
    api_version = _required_str(data, "apiVersion", "object")
    kind = _required_str(data, "kind", "object")
    group, _, version = api_version.rpartition("/")

    for route_type in ROUTE_TYPES:
        if group != route_type.GROUP or kind != route_type.KIND:
            continue
        if version not in route_type.VERSIONS:
            served = ", ".join(sorted(route_type.VERSIONS))
            msg = f"unsupported {kind} version {api_version!r} (served: {served})"
            raise ParseError(msg)
        return route_type(
            metadata=_parse_metadata(_required(data, "metadata", "object")),
            spec=_parse_route_spec(data.get("spec") or {}),
            status=_optional(data, "status", _parse_route_status),
        )

    msg = f"unsupported resource {kind!r} in {api_version!r}"
    raise ParseError(msg)


# ═══════════════════════════════════════════════════════════════════════════════
# Field helpers
# ═══════════════════════════════════════════════════════════════════════════════


def _expect_dict(data: Any, where: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        msg = f"{where} must be a dict, got {type(data).__name__}"
        raise ParseError(msg)
    return data


def _required(data: dict[str, Any], key: str, where: str) -> Any:
    if data.get(key) is None:
        msg = f"{where} missing required field {key!r}"
        raise ParseError(msg)
    return data[key]


def _required_str(data: dict[str, Any], key: str, where: str) -> str:
    value = _required(data, key, where)
    if not isinstance(value, str):
        msg = f"{where} field {key!r} must be a string, got {type(value).__name__}"
        raise ParseError(msg)
    return value


def _optional_str(data: dict[str, Any], key: str, where: str) -> str | None:
    if data.get(key) is None:
        return None
    return _required_str(data, key, where)


def _optional_int(data: dict[str, Any], key: str, where: str) -> int | None:
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{where} field {key!r} must be an integer, got {type(value).__name__}"
        raise ParseError(msg)
    return value


def _optional[T](
    data: dict[str, Any], key: str, parse: Callable[[dict[str, Any]], T]
) -> T | None:
    value = data.get(key)
    if value is None:
        return None
    return parse(value)


def _optional_list[T](
    data: dict[str, Any], key: str, where: str, parse: Callable[[Any], T]
) -> tuple[T, ...] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list):
        msg = f"{where} field {key!r} must be a list, got {type(value).__name__}"
        raise ParseError(msg)
    return tuple(parse(item) for item in value)


def _str_map(data: dict[str, Any], key: str, where: str) -> dict[str, str]:
    value = data.get(key) or {}
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        msg = f"{where} field {key!r} must be a map of strings"
        raise ParseError(msg)
    return dict(value)


def _discriminant(data: dict[str, Any], where: str, allowed: frozenset[str]) -> str:
    type_ = _required_str(data, "type", where)
    if type_ not in allowed:
        msg = f"unknown {where} type: {type_!r} (expected one of {sorted(allowed)})"
        raise ParseError(msg)
    return type_


def _as_str(where: str) -> Callable[[Any], str]:
    def parse(value: Any) -> str:
        if not isinstance(value, str):
            msg = f"{where} entries must be strings, got {type(value).__name__}"
            raise ParseError(msg)
        return value

    return parse


# ═══════════════════════════════════════════════════════════════════════════════
# Metadata, spec and status
# ═══════════════════════════════════════════════════════════════════════════════


def _parse_metadata(data: Any) -> ObjectMeta:
    data = _expect_dict(data, "metadata")
    return ObjectMeta(
        name=_required_str(data, "name", "metadata"),
        namespace=_optional_str(data, "namespace", "metadata"),
        resource_version=_optional_str(data, "resourceVersion", "metadata"),
        generation=_optional_int(data, "generation", "metadata"),
        labels=_str_map(data, "labels", "metadata"),
        annotations=_str_map(data, "annotations", "metadata"),
    )


def _parse_parent_ref(data: Any) -> ParentReference:
    data = _expect_dict(data, "parentRef")
    return ParentReference(
        name=_required_str(data, "name", "parentRef"),
        group=_optional_str(data, "group", "parentRef"),
        kind=_optional_str(data, "kind", "parentRef"),
        namespace=_optional_str(data, "namespace", "parentRef"),
        section_name=_optional_str(data, "sectionName", "parentRef"),
        port=_optional_int(data, "port", "parentRef"),
    )


def _parse_route_spec(data: Any) -> HttpRouteSpec:
    data = _expect_dict(data, "spec")
    return HttpRouteSpec(
        inner=CommonRouteSpec(
            parent_refs=_optional_list(data, "parentRefs", "spec", _parse_parent_ref),
        ),
        hostnames=_optional_list(data, "hostnames", "spec", _as_str("hostnames")),
        rules=_optional_list(data, "rules", "spec", _parse_rule),
    )


def _parse_condition(data: Any) -> Condition:
    data = _expect_dict(data, "condition")
    status = _required_str(data, "status", "condition")
    if status not in _CONDITION_STATUSES:
        msg = f"unknown condition status: {status!r}"
        raise ParseError(msg)
    return Condition(
        type=_required_str(data, "type", "condition"),
        status=status,  # type: ignore[arg-type]
        reason=_required_str(data, "reason", "condition"),
        message=_optional_str(data, "message", "condition") or "",
        last_transition_time=_optional_str(data, "lastTransitionTime", "condition"),
        observed_generation=_optional_int(data, "observedGeneration", "condition"),
    )


def _parse_parent_status(data: Any) -> RouteParentStatus:
    data = _expect_dict(data, "parent status")
    return RouteParentStatus(
        parent_ref=_parse_parent_ref(_required(data, "parentRef", "parent status")),
        controller_name=_required_str(data, "controllerName", "parent status"),
        conditions=_optional_list(data, "conditions", "parent status", _parse_condition)
        or (),
    )


def _parse_route_status(data: Any) -> RouteStatus:
    data = _expect_dict(data, "status")
    return RouteStatus(
        parents=_optional_list(data, "parents", "status", _parse_parent_status) or (),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Rules, matches and filters
# ═══════════════════════════════════════════════════════════════════════════════


def _parse_rule(data: Any) -> HttpRouteRule:
    data = _expect_dict(data, "rule")
    return HttpRouteRule(
        matches=_optional_list(data, "matches", "rule", _parse_match),
        filters=_optional_list(data, "filters", "rule", _parse_filter),
    )


def _parse_match(data: Any) -> HttpRouteMatch:
    data = _expect_dict(data, "match")
    return HttpRouteMatch(
        path=_optional(data, "path", _parse_path_match),
        headers=_optional_list(data, "headers", "match", _parse_header_match),
        query_params=_optional_list(
            data, "queryParams", "match", _parse_query_param_match
        ),
        method=_optional_str(data, "method", "match"),
    )


def _parse_path_match(data: Any) -> HttpPathMatch:
    """Parse a path match. The wire default type is PathPrefix."""
    data = _expect_dict(data, "path match")
    type_ = "PathPrefix"
    if data.get("type") is not None:
        type_ = _discriminant(data, "path match", _PATH_MATCH_TYPES)
    value = _optional_str(data, "value", "path match")
    return HttpPathMatch(
        type=type_,  # type: ignore[arg-type]
        value="/" if value is None else value,
    )


def _parse_header_match(data: Any) -> HttpHeaderMatch:
    data = _expect_dict(data, "header match")
    type_ = "Exact"
    if data.get("type") is not None:
        type_ = _discriminant(data, "header match", _VALUE_MATCH_TYPES)
    return HttpHeaderMatch(
        type=type_,  # type: ignore[arg-type]
        name=_required_str(data, "name", "header match"),
        value=_required_str(data, "value", "header match"),
    )


def _parse_query_param_match(data: Any) -> HttpQueryParamMatch:
    data = _expect_dict(data, "query param match")
    type_ = "Exact"
    if data.get("type") is not None:
        type_ = _discriminant(data, "query param match", _VALUE_MATCH_TYPES)
    return HttpQueryParamMatch(
        type=type_,  # type: ignore[arg-type]
        name=_required_str(data, "name", "query param match"),
        value=_required_str(data, "value", "query param match"),
    )


def _parse_header(data: Any) -> HttpHeader:
    data = _expect_dict(data, "header")
    return HttpHeader(
        name=_required_str(data, "name", "header"),
        value=_required_str(data, "value", "header"),
    )


def _parse_header_filter(data: Any) -> HttpRequestHeaderFilter:
    data = _expect_dict(data, "header modifier")
    return HttpRequestHeaderFilter(
        set=_optional_list(data, "set", "header modifier", _parse_header),
        add=_optional_list(data, "add", "header modifier", _parse_header),
        remove=_optional_list(data, "remove", "header modifier", _as_str("remove")),
    )


def _parse_path_modifier(data: Any) -> HttpPathModifier:
    data = _expect_dict(data, "path modifier")
    type_ = _discriminant(data, "path modifier", _PATH_MODIFIER_TYPES)
    if type_ == "ReplaceFullPath":
        return ReplaceFullPath(
            replace_full_path=_required_str(data, "replaceFullPath", "path modifier"),
        )
    return ReplacePrefixMatch(
        replace_prefix_match=_required_str(data, "replacePrefixMatch", "path modifier"),
    )


def _parse_redirect(data: Any) -> HttpRequestRedirectFilter:
    data = _expect_dict(data, "request redirect")
    return HttpRequestRedirectFilter(
        scheme=_optional_str(data, "scheme", "request redirect"),
        hostname=_optional_str(data, "hostname", "request redirect"),
        path=_optional(data, "path", _parse_path_modifier),
        port=_optional_int(data, "port", "request redirect"),
        status_code=_optional_int(data, "statusCode", "request redirect"),
    )


def _parse_filter(data: Any) -> HttpRouteFilter:
    """Parse a rule filter.

    Uses 'type' discriminant; the body lives under the lowerCamel type key.
    """
    data = _expect_dict(data, "filter")
    type_ = _required_str(data, "type", "filter")

    if type_ == "RequestHeaderModifier":
        body = _required(data, "requestHeaderModifier", "filter")
        return RequestHeaderModifierFilter(
            request_header_modifier=_parse_header_filter(body),
        )
    if type_ == "ResponseHeaderModifier":
        body = _required(data, "responseHeaderModifier", "filter")
        return ResponseHeaderModifierFilter(
            response_header_modifier=_parse_header_filter(body),
        )
    if type_ == "RequestRedirect":
        body = _required(data, "requestRedirect", "filter")
        return RequestRedirectFilter(request_redirect=_parse_redirect(body))
    if type_ in _UNSUPPORTED_FILTER_TYPES:
        config = {k: v for k, v in data.items() if k != "type"}
        return UnsupportedFilter(type=type_, config=config)

    msg = f"unknown filter type: {type_!r}"
    raise ParseError(msg)
