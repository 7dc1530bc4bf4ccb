"""
Main GitHub API client.

This module provides the GitHubClient class, the entry point that owns
the shared transport and hands it to the endpoint clients.
"""

from typing import Dict, Optional
import logging

from github_client.config import ClientSettings
from github_client.endpoints import OrganizationsClient
from github_client.http import (
    DEFAULT_BASE_URL,
    DEFAULT_USER_AGENT,
    AsyncHTTPClient,
    TokenAuthProvider,
)

logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Main client for the GitHub API.

    Example usage:
        ```python
        async with GitHubClient(token="ghp_...") as client:
            orgs, response = await client.organizations.list("octocat")
            org, _ = await client.organizations.get("github")
        ```
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token: Optional[str] = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = 30.0,
        headers: Optional[Dict[str, str]] = None,
        http_client: Optional[AsyncHTTPClient] = None,
    ):
        """
        Initialize the GitHub client.

        Args:
            base_url: API root (e.g., "https://api.github.com/")
            token: Personal access token (optional)
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            headers: Additional headers to include in all requests
            http_client: Pre-built transport; the other arguments are
                ignored when given
        """
        self._auth_provider = TokenAuthProvider(token)
        if http_client is None:
            http_client = AsyncHTTPClient(
                base_url=base_url,
                auth_provider=self._auth_provider,
                user_agent=user_agent,
                timeout=timeout,
                headers=headers,
            )
        else:
            self._auth_provider = getattr(http_client, "auth_provider", None) or self._auth_provider
        self._http = http_client
        self._organizations: Optional[OrganizationsClient] = None

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None) -> "GitHubClient":
        """Build a client from ``GITHUB_*`` environment settings."""
        settings = settings or ClientSettings()
        logger.debug(f"Creating client for {settings.base_url}")
        return cls(
            settings.base_url,
            token=settings.token,
            user_agent=settings.user_agent,
            timeout=settings.timeout,
        )

    @property
    def base_url(self) -> str:
        """Get the base URL for the API."""
        return str(self._http.base_url)

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._auth_provider.is_authenticated()

    @property
    def http(self) -> AsyncHTTPClient:
        """Get the underlying transport for custom requests."""
        return self._http

    @property
    def organizations(self) -> OrganizationsClient:
        """Organization endpoints."""
        if self._organizations is None:
            self._organizations = OrganizationsClient(self._http)
        return self._organizations

    def set_token(self, token: str) -> None:
        """Set the access token used for subsequent requests."""
        self._auth_provider.set_token(token)
        logger.debug("Access token set")

    def clear_token(self) -> None:
        """Clear the access token."""
        self._auth_provider.clear_token()
        logger.debug("Access token cleared")

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()
        logger.debug("Client closed")

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    def __repr__(self) -> str:
        auth_status = "authenticated" if self.is_authenticated else "not authenticated"
        return f"GitHubClient(base_url={self.base_url!r}, {auth_status})"
