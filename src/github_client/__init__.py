"""
GitHub Organizations Client Library.

A typed async client for the organization endpoints of the GitHub API.

Example usage:
    ```python
    from github_client import GitHubClient, ListOptions, Organization

    async with GitHubClient(token="ghp_...") as client:
        # Organizations of the authenticated user, second page
        orgs, response = await client.organizations.list("", ListOptions(page=2))

        # A single organization
        org, _ = await client.organizations.get("github")

        # Edit: only the fields that are set are sent
        org, _ = await client.organizations.edit(
            "my-org", Organization(location="Vienna")
        )
    ```
"""

__version__ = "0.1.0"

# Main client
from github_client.client import GitHubClient
from github_client.config import ClientSettings

# HTTP client components (for advanced usage)
from github_client.http import (
    AsyncHTTPClient,
    AuthProvider,
    Response,
    TokenAuthProvider,
)

# Endpoint clients
from github_client.base import BaseEndpointClient
from github_client.endpoints import OrganizationsClient

# Types
from github_client.types import ListOptions, Organization, Plan, Rate

# Exceptions
from github_client.exceptions import (
    GitHubClientError,
    RequestError,
    DecodeError,
    BadRequestError,
    AuthenticationError,
    AuthorizationError,
    RateLimitError,
    NotFoundError,
    ValidationError,
    ServerError,
    NetworkError,
    TimeoutError,
    exception_from_response,
)

__all__ = [
    "__version__",
    "GitHubClient",
    "ClientSettings",
    "AsyncHTTPClient",
    "AuthProvider",
    "Response",
    "TokenAuthProvider",
    "BaseEndpointClient",
    "OrganizationsClient",
    "ListOptions",
    "Organization",
    "Plan",
    "Rate",
    "GitHubClientError",
    "RequestError",
    "DecodeError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "RateLimitError",
    "NotFoundError",
    "ValidationError",
    "ServerError",
    "NetworkError",
    "TimeoutError",
    "exception_from_response",
]
