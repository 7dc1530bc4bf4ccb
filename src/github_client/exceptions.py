"""
Exception hierarchy for the GitHub client library.

Errors fall into two groups:
- local request-construction failures (``RequestError``), raised before
  any network call is made
- transport, status and decode failures, raised by the HTTP client and
  carrying whatever ``Response`` metadata was produced
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from github_client.http import Response
    from github_client.types.common import Rate


class GitHubClientError(Exception):
    """
    Base exception for all GitHub client errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (if applicable)
        response: Response metadata produced by the transport (if any)
        errors: Field-level error entries from the API error body
        documentation_url: Link to the relevant API docs, when returned
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        response: Optional["Response"] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        documentation_url: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
        self.errors = errors or []
        self.documentation_url = documentation_url

    def __str__(self) -> str:
        parts = [self.message]
        if self.status_code:
            parts.append(f"(HTTP {self.status_code})")
        return " ".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"status_code={self.status_code})"
        )


# =============================================================================
# Local Errors
# =============================================================================


class RequestError(GitHubClientError):
    """A request could not be built (bad path, unencodable body)."""

    def __init__(self, message: str = "Invalid request"):
        super().__init__(message)


class DecodeError(GitHubClientError):
    """The response body could not be decoded into the requested type."""

    def __init__(
        self,
        message: str = "Could not decode response",
        *,
        status_code: Optional[int] = None,
        response: Optional["Response"] = None,
    ):
        super().__init__(message, status_code=status_code, response=response)


# =============================================================================
# HTTP Status Errors
# =============================================================================


class BadRequestError(GitHubClientError):
    """The API rejected the request as malformed (400)."""


class AuthenticationError(GitHubClientError):
    """
    Authentication failed or credentials are missing.

    Raised on 401, e.g. for a revoked or mistyped token.
    """


class AuthorizationError(GitHubClientError):
    """The token is valid but lacks access to the resource (403)."""


class RateLimitError(AuthorizationError):
    """
    Rate limit exceeded.

    GitHub reports this as a 403 with ``X-RateLimit-Remaining: 0``. The
    ``rate`` attribute tells when the window resets.
    """

    def __init__(
        self,
        message: str = "API rate limit exceeded",
        *,
        status_code: Optional[int] = 403,
        response: Optional["Response"] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        documentation_url: Optional[str] = None,
        rate: Optional["Rate"] = None,
    ):
        super().__init__(
            message,
            status_code=status_code,
            response=response,
            errors=errors,
            documentation_url=documentation_url,
        )
        if rate is None and response is not None:
            rate = response.rate
        self.rate = rate


class NotFoundError(GitHubClientError):
    """
    Requested resource was not found.

    GitHub also answers 404 for private resources the token cannot see.
    """


class ValidationError(GitHubClientError):
    """
    The request body failed server-side validation (422).

    ``errors`` holds entries such as
    ``{"resource": "Organization", "field": "billing_email", "code": "invalid"}``.
    """

    def field_errors(self) -> Dict[str, str]:
        """Map each failing field to its error code."""
        return {
            entry["field"]: entry.get("code", "invalid")
            for entry in self.errors
            if isinstance(entry, dict) and "field" in entry
        }


class ServerError(GitHubClientError):
    """Server-side error occurred (5xx)."""


# =============================================================================
# Network Errors (Client-side)
# =============================================================================


class NetworkError(GitHubClientError):
    """
    Network-level error occurred.

    Raised when there's a connection problem, DNS failure, or other
    transport issue. No response metadata is available.
    """

    def __init__(self, message: str = "Network error"):
        super().__init__(message)


class TimeoutError(NetworkError):
    """Request timed out."""

    def __init__(self, message: str = "Request timed out"):
        super().__init__(message)


# =============================================================================
# Exception Mapping
# =============================================================================

STATUS_CODE_EXCEPTIONS = {
    400: BadRequestError,
    401: AuthenticationError,
    403: AuthorizationError,
    404: NotFoundError,
    422: ValidationError,
}


def exception_from_response(
    status_code: int,
    message: str,
    *,
    response: Optional["Response"] = None,
    errors: Optional[List[Dict[str, Any]]] = None,
    documentation_url: Optional[str] = None,
) -> GitHubClientError:
    """
    Create an appropriate exception from an HTTP error response.

    Args:
        status_code: HTTP status code
        message: Error message
        response: Response metadata to attach
        errors: Field-level error entries
        documentation_url: API docs link from the error body

    Returns:
        Appropriate GitHubClientError subclass
    """
    if (
        status_code == 403
        and response is not None
        and response.rate.remaining == 0
    ):
        exception_class = RateLimitError
    elif 500 <= status_code < 600:
        exception_class = ServerError
    else:
        exception_class = STATUS_CODE_EXCEPTIONS.get(status_code, GitHubClientError)
    return exception_class(
        message,
        status_code=status_code,
        response=response,
        errors=errors,
        documentation_url=documentation_url,
    )
