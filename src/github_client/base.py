"""
Base class for typed endpoint clients.

Endpoint clients hold nothing but the injected transport and build their
request paths from URL templates.
"""

from typing import Any, Dict, Optional
from urllib.parse import quote

from pydantic import BaseModel

from github_client.exceptions import RequestError
from github_client.http import AsyncHTTPClient


class BaseEndpointClient:
    """
    Common functionality for endpoint clients.

    The transport may be an ``AsyncHTTPClient`` or any object offering the
    same ``new_request`` and ``do`` methods.
    """

    def __init__(self, http_client: AsyncHTTPClient):
        """
        Initialize the endpoint client.

        Args:
            http_client: The transport used to build and send requests
        """
        self._http = http_client

    def _build_path(self, template: str, **segments: str) -> str:
        """
        Fill a path template with percent-encoded segments.

        Raises:
            RequestError: If a segment is empty or a dot-segment
        """
        encoded = {}
        for name, value in segments.items():
            if not value:
                raise RequestError(f"Missing path segment: {name}")
            if str(value) in (".", ".."):
                raise RequestError(f"Invalid path segment for {name}: {value!r}")
            encoded[name] = quote(str(value), safe="")
        return template.format(**encoded)

    def _query_to_params(self, query: Optional[BaseModel]) -> Optional[Dict[str, Any]]:
        """Convert a query model to request parameters."""
        if query is None:
            return None
        params = query.model_dump(mode="json", exclude_none=True)
        return params or None
