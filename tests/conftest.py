"""Shared fixtures and the YAML route-case loader.

Cases in fixtures/routes.yaml are schema-neutral: each one is expanded once
per route type so both schemas are held to the same expectations.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import pytest
import yaml

from gwroute.api import ROUTE_TYPES

if TYPE_CHECKING:
    from collections.abc import Callable

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class RouteCase:
    """A single conversion case from the route fixtures."""

    case_name: str
    manifest: dict[str, Any]
    rules: int | None
    error: str | None


def _make_manifest(
    api_version: str,
    spec: dict[str, Any],
    *,
    name: str = "web",
    namespace: str | None = "default",
    kind: str = "HTTPRoute",
) -> dict[str, Any]:
    """Build a raw HTTPRoute object as the API server would return it."""
    metadata: dict[str, Any] = {"name": name, "resourceVersion": "1", "generation": 1}
    if namespace is not None:
        metadata["namespace"] = namespace
    return {"apiVersion": api_version, "kind": kind, "metadata": metadata, "spec": spec}


def load_route_cases() -> list[RouteCase]:
    with (FIXTURES_DIR / "routes.yaml").open() as f:
        raw = yaml.safe_load(f)

    cases = []
    for route_type in ROUTE_TYPES:
        version = sorted(route_type.VERSIONS)[0]
        for entry in raw:
            cases.append(
                RouteCase(
                    case_name=f"{route_type.__name__}: {entry['name']}",
                    manifest=_make_manifest(f"{route_type.GROUP}/{version}", entry["spec"]),
                    rules=entry.get("rules"),
                    error=entry.get("error"),
                )
            )
    return cases


@pytest.fixture
def gateway_manifest() -> dict[str, Any]:
    return _make_manifest(
        "gateway.networking.k8s.io/v1",
        {
            "parentRefs": [{"name": "edge", "sectionName": "http"}],
            "hostnames": ["*.example.com"],
            "rules": [
                {
                    "matches": [{"path": {"type": "PathPrefix", "value": "/api"}, "method": "GET"}],
                    "filters": [
                        {
                            "type": "RequestHeaderModifier",
                            "requestHeaderModifier": {"add": [{"name": "x-trace", "value": "1"}]},
                        }
                    ],
                }
            ],
        },
    )


@pytest.fixture
def policy_manifest(gateway_manifest: dict[str, Any]) -> dict[str, Any]:
    return {**gateway_manifest, "apiVersion": "policy.linkerd.io/v1beta3"}


@pytest.fixture
def make_manifest() -> Callable[..., dict[str, Any]]:
    return _make_manifest


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    """Parametrize any test taking ``route_case`` over the YAML fixtures."""
    if "route_case" in metafunc.fixturenames:
        cases = load_route_cases()
        metafunc.parametrize("route_case", cases, ids=[c.case_name for c in cases])
