"""Pytest configuration and fixtures for github-orgs-client tests."""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from github_client.http import AsyncHTTPClient, Response


API_URL = "https://api.github.com/"


# ============================================================================
# Stub API
# ============================================================================


class StubAPI:
    """
    Request handler for ``httpx.MockTransport``.

    Answers every request with the same canned response and records what
    it was sent.
    """

    def __init__(
        self,
        status_code: int = 200,
        json_data: Optional[Any] = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        self.status_code = status_code
        self.json_data = json_data
        self.content = content
        self.headers = headers or {}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        if self.json_data is not None:
            return httpx.Response(self.status_code, json=self.json_data, headers=self.headers)
        return httpx.Response(self.status_code, headers=self.headers)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last_request.content)


def stub_transport(stub: StubAPI, **kwargs: Any) -> AsyncHTTPClient:
    """Create a transport whose network calls are answered by ``stub``."""
    return AsyncHTTPClient(
        client=httpx.AsyncClient(transport=httpx.MockTransport(stub)),
        **kwargs,
    )


def make_response(
    status_code: int = 200,
    json_data: Optional[Any] = None,
    headers: Optional[Dict[str, str]] = None,
    url: str = API_URL,
) -> Response:
    """Create response metadata without a network call."""
    http_response = httpx.Response(
        status_code,
        json=json_data,
        headers=headers,
        request=httpx.Request("GET", url),
    )
    return Response(http_response)


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def base_url():
    """Default base URL for testing."""
    return API_URL


@pytest.fixture
def http_client():
    """Transport without network access, for building requests."""
    return AsyncHTTPClient(base_url=API_URL)


@pytest.fixture
def mock_organization_data():
    """Organization as returned by GET /orgs/{org}."""
    return {
        "login": "github",
        "id": 9919,
        "url": "https://api.github.com/orgs/github",
        "avatar_url": "https://avatars.githubusercontent.com/u/9919?v=4",
        "name": "GitHub",
        "blog": "https://github.com/about",
        "location": "San Francisco, CA",
        "email": None,
        "public_repos": 369,
        "public_gists": 0,
        "followers": 0,
        "following": 0,
        "created_at": "2008-05-11T04:37:31Z",
        "updated_at": "2022-11-29T19:44:55Z",
        "type": "Organization",
        "plan": {"name": "enterprise", "space": 976562499, "private_repos": 999999},
    }


@pytest.fixture
def mock_organizations_list():
    """Organization summaries as returned by list endpoints."""
    return [
        {"login": "github", "id": 9919, "url": "https://api.github.com/orgs/github"},
        {"login": "octo-org", "id": 6811672},
        {"login": "empty-org"},
    ]


@pytest.fixture
def rate_headers():
    """Rate limit headers of a healthy response."""
    return {
        "X-RateLimit-Limit": "5000",
        "X-RateLimit-Remaining": "4999",
        "X-RateLimit-Reset": "1372700873",
    }
