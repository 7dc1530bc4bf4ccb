"""
Async HTTP transport for the GitHub API.

This module provides the transport collaborator shared by all endpoint
clients, built on httpx:
- Relative path resolution against a base URL
- Token authentication and GitHub media-type headers
- Response metadata (rate limit, pagination links)
- Mapping of error responses to exceptions
- JSON decoding into pydantic models
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from functools import lru_cache
from typing import Any, Dict, Optional, Tuple, Union
import logging

import httpx
from pydantic import BaseModel, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from github_client import __version__
from github_client.exceptions import (
    DecodeError,
    NetworkError,
    RequestError,
    TimeoutError as ClientTimeoutError,
    exception_from_response,
)
from github_client.types.common import Rate

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.github.com/"
DEFAULT_USER_AGENT = f"github-orgs-client/{__version__}"
MEDIA_TYPE = "application/vnd.github.v3+json"

HEADER_RATE_LIMIT = "X-RateLimit-Limit"
HEADER_RATE_REMAINING = "X-RateLimit-Remaining"
HEADER_RATE_RESET = "X-RateLimit-Reset"


class AuthProvider(ABC):
    """Abstract base class for authentication providers."""

    @abstractmethod
    def get_token(self) -> Optional[str]:
        """Get the current access token."""
        ...

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if a token is available."""
        ...


class TokenAuthProvider(AuthProvider):
    """Personal access token authentication."""

    def __init__(self, token: Optional[str] = None):
        self._token = token

    def get_token(self) -> Optional[str]:
        return self._token

    def is_authenticated(self) -> bool:
        return bool(self._token)

    def set_token(self, token: str) -> None:
        """Set the access token."""
        self._token = token

    def clear_token(self) -> None:
        """Clear the access token."""
        self._token = None


def _parse_int(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_rate(headers: httpx.Headers) -> Rate:
    """Read rate limit state from response headers."""
    reset = _parse_int(headers.get(HEADER_RATE_RESET))
    return Rate(
        limit=_parse_int(headers.get(HEADER_RATE_LIMIT)),
        remaining=_parse_int(headers.get(HEADER_RATE_REMAINING)),
        reset=datetime.fromtimestamp(reset, tz=timezone.utc) if reset is not None else None,
    )


class Response:
    """
    Metadata for a completed API call.

    Wraps the ``httpx.Response`` and exposes the rate limit state and the
    page numbers advertised in the ``Link`` header.
    """

    def __init__(self, http_response: httpx.Response):
        self.http_response = http_response
        self.rate = parse_rate(http_response.headers)
        self.next_page: Optional[int] = None
        self.prev_page: Optional[int] = None
        self.first_page: Optional[int] = None
        self.last_page: Optional[int] = None
        self._populate_page_values()

    @property
    def status_code(self) -> int:
        return self.http_response.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http_response.headers

    @property
    def url(self) -> httpx.URL:
        return self.http_response.request.url

    def _populate_page_values(self) -> None:
        for rel, link in self.http_response.links.items():
            url = link.get("url")
            if not url:
                continue
            try:
                page = _parse_int(httpx.URL(url).params.get("page"))
            except httpx.InvalidURL:
                continue
            if rel == "next":
                self.next_page = page
            elif rel == "prev":
                self.prev_page = page
            elif rel == "first":
                self.first_page = page
            elif rel == "last":
                self.last_page = page

    def __repr__(self) -> str:
        return f"Response(status_code={self.status_code}, url={str(self.url)!r})"


@lru_cache(maxsize=None)
def _type_adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class AsyncHTTPClient:
    """
    Async HTTP client for GitHub API requests.

    This client handles:
    - Base URL management
    - Authentication and media-type header injection
    - Response metadata and error mapping
    - Decoding JSON bodies into typed models

    Each ``do`` call performs exactly one network request; there are no
    retries.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        auth_provider: Optional[AuthProvider] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the HTTP client.

        Args:
            base_url: Base URL for the API (e.g., "https://api.github.com/")
            auth_provider: Authentication provider for token management
            user_agent: Value of the User-Agent header
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            client: Pre-built httpx client (e.g. with a mock transport)
        """
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"
        self.base_url = httpx.URL(base_url)
        self.auth_provider = auth_provider or TokenAuthProvider()
        self.user_agent = user_agent
        self.timeout = timeout
        self._default_headers = headers or {}
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                follow_redirects=True,
            )
        return self._client

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "AsyncHTTPClient":
        await self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def _build_headers(self) -> Dict[str, str]:
        """Build request headers with authentication."""
        headers = {
            "Accept": MEDIA_TYPE,
            "User-Agent": self.user_agent,
            **self._default_headers,
        }
        if self.auth_provider and self.auth_provider.is_authenticated():
            token = self.auth_provider.get_token()
            if token:
                headers["Authorization"] = f"token {token}"
        return headers

    def _resolve(self, path: str) -> httpx.URL:
        """Resolve a relative API path against the base URL."""
        if path.startswith("/"):
            raise RequestError(f"Path must be relative to the base URL: {path!r}")
        try:
            relative = httpx.URL(path)
        except httpx.InvalidURL as e:
            raise RequestError(f"Invalid path {path!r}: {e}") from e
        if relative.is_absolute_url:
            raise RequestError(f"Path must be relative to the base URL: {path!r}")
        return self.base_url.join(relative)

    def new_request(
        self,
        method: str,
        path: str,
        body: Optional[Union[Dict[str, Any], BaseModel]] = None,
        *,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Request:
        """
        Build a request without sending it.

        Args:
            method: HTTP method (GET, PATCH, ...)
            path: Path relative to the base URL, may carry a query string
            body: JSON body (dict or pydantic model); ``None`` values are dropped
            params: Extra query parameters; ``None`` values are dropped

        Returns:
            httpx.Request ready for ``do``

        Raises:
            RequestError: If the path or body cannot be encoded
        """
        url = self._resolve(path)
        headers = self._build_headers()

        json_data = None
        if body is not None:
            try:
                if isinstance(body, BaseModel):
                    json_data = body.model_dump(mode="json", exclude_none=True)
                else:
                    json_data = {k: v for k, v in body.items() if v is not None}
            except PydanticSerializationError as e:
                raise RequestError(f"Could not encode request body: {e}") from e

        if params:
            params = {k: v for k, v in params.items() if v is not None}

        try:
            return httpx.Request(
                method,
                url,
                params=params or None,
                json=json_data,
                headers=headers,
                extensions={"timeout": httpx.Timeout(self.timeout).as_dict()},
            )
        except (TypeError, ValueError) as e:
            raise RequestError(f"Could not build {method} request for {path!r}: {e}") from e

    def check_response(self, response: Response) -> None:
        """
        Convert an error response to the matching exception.

        Args:
            response: Response metadata of the completed call

        Raises:
            GitHubClientError: Subclass matching the status code
        """
        http_response = response.http_response
        if http_response.is_success:
            return

        status_code = http_response.status_code
        errors = None
        documentation_url = None
        # Try to parse error details from response body
        try:
            error_data = http_response.json()
            if isinstance(error_data, dict):
                message = error_data.get("message") or f"HTTP {status_code}"
                errors = error_data.get("errors")
                documentation_url = error_data.get("documentation_url")
            else:
                message = str(error_data)
        except ValueError:
            message = http_response.text or f"HTTP {status_code}"

        logger.warning(
            f"{http_response.request.method} {http_response.request.url} "
            f"failed with {status_code}: {message}"
        )
        raise exception_from_response(
            status_code,
            message,
            response=response,
            errors=errors if isinstance(errors, list) else None,
            documentation_url=documentation_url,
        )

    async def do(
        self,
        request: httpx.Request,
        decode_target: Optional[Any] = None,
    ) -> Tuple[Any, Response]:
        """
        Send a request and decode the JSON body.

        Args:
            request: Request built by ``new_request``
            decode_target: Pydantic model class or any type understood by
                ``pydantic.TypeAdapter`` (e.g. ``List[Organization]``);
                ``None`` skips decoding

        Returns:
            Tuple of the decoded body (or None) and the response metadata

        Raises:
            GitHubClientError: On error status codes
            NetworkError: On connection failures
            TimeoutError: On request timeout
            DecodeError: If the body is not valid for ``decode_target``
        """
        client = await self._get_client()

        logger.debug(f"{request.method} {request.url}")
        try:
            http_response = await client.send(request)
        except httpx.TimeoutException as e:
            raise ClientTimeoutError(f"Request timed out: {e}") from e
        except httpx.TransportError as e:
            raise NetworkError(f"Request failed: {e}") from e

        response = Response(http_response)
        logger.debug(
            f"{request.method} {request.url} -> {response.status_code} "
            f"(rate remaining: {response.rate.remaining})"
        )
        self.check_response(response)

        if decode_target is None or not http_response.content:
            return None, response

        try:
            decoded = _type_adapter(decode_target).validate_json(http_response.content)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Could not decode response as {getattr(decode_target, '__name__', decode_target)}: {e}",
                status_code=response.status_code,
                response=response,
            ) from e

        return decoded, response
