"""
Test Configuration
------------------
Shared fixtures for all tests.

HTTP is served by httpx.MockTransport; real network access is blocked.
"""

import json
import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from rocketreach import RocketReach  # noqa: E402

API_PREFIX = "/api/v2"


# =============================================================================
# Test Isolation: Block Side Effects
# =============================================================================

@pytest.fixture(autouse=True)
def block_real_network(monkeypatch):
    """
    Fail any request that reaches a real HTTP transport.

    Tests must pass a MockTransport to the client.
    """
    def _blocked(self, request):
        raise RuntimeError(f"Network access is forbidden during tests: {request.url}")

    monkeypatch.setattr(httpx.HTTPTransport, "handle_request", _blocked)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Drop ROCKETREACH_* variables so the developer's shell cannot leak in."""
    for key in list(os.environ):
        if key.startswith("ROCKETREACH_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Stub API
# =============================================================================

Route = Union[Tuple[int, Any], Callable[[httpx.Request], httpx.Response]]


class StubAPI:
    """
    Routes requests by (method, path) and records each one.

    Paths are relative to the API prefix ('/company/lookup/'). Unrouted
    requests get a 404.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, body: Any = None, status_code: int = 200) -> None:
        self.routes[(method, path)] = (status_code, body)

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.startswith(API_PREFIX):
            path = path[len(API_PREFIX):]

        route = self.routes.get((request.method, path))
        if route is None:
            return httpx.Response(404, json={"detail": "Not found"})
        if callable(route):
            return route(request)

        status_code, body = route
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def paths(self) -> List[str]:
        return [r.url.path[len(API_PREFIX):] for r in self.requests]

    def body(self, index: int = -1) -> Optional[Any]:
        content = self.requests[index].content
        return json.loads(content) if content else None


@pytest.fixture
def stub_api():
    return StubAPI()


@pytest.fixture
def client(stub_api):
    """RocketReach client wired to the stub API."""
    return RocketReach("test-api-key", transport=httpx.MockTransport(stub_api.handler))


@pytest.fixture
def employees():
    """Five employees: 2 C-Level and 1 VP in A, 2 individual contributors in B."""
    return [
        {"id": 1, "name": "Ada", "current_title": "CEO", "department": "A"},
        {"id": 2, "name": "Grace", "current_title": "Chief Technology Officer", "department": "A"},
        {"id": 3, "name": "Linus", "current_title": "VP of Engineering", "department": "A"},
        {"id": 4, "name": "Ken", "current_title": "Software Engineer", "department": "B"},
        {"id": 5, "name": "Barbara", "current_title": "Data Analyst", "department": "B"},
    ]
