"""
Organization endpoints.

GitHub API docs: https://docs.github.com/en/rest/orgs/orgs
"""

from typing import Any, Dict, List, Optional, Tuple, Union

from github_client.base import BaseEndpointClient
from github_client.http import Response
from github_client.types.common import ListOptions
from github_client.types.organizations import Organization


class OrganizationsClient(BaseEndpointClient):
    """
    Client for organization endpoints.
    """

    async def list(
        self,
        user: str = "",
        options: Optional[ListOptions] = None,
    ) -> Tuple[List[Organization], Response]:
        """
        List the organizations of a user.

        Passing an empty ``user`` lists the organizations of the
        authenticated user.
        """
        if user:
            path = self._build_path("users/{user}/orgs", user=user)
        else:
            path = "user/orgs"

        request = self._http.new_request(
            "GET", path, params=self._query_to_params(options)
        )
        orgs, response = await self._http.do(request, List[Organization])
        return orgs if orgs is not None else [], response

    async def get(self, org: str) -> Tuple[Organization, Response]:
        """Fetch an organization by login."""
        path = self._build_path("orgs/{org}", org=org)
        request = self._http.new_request("GET", path)
        organization, response = await self._http.do(request, Organization)
        return organization if organization is not None else Organization(), response

    async def edit(
        self,
        name: str,
        org: Union[Organization, Dict[str, Any]],
    ) -> Tuple[Organization, Response]:
        """
        Edit an organization.

        Only the fields set on ``org`` are sent; the returned organization
        is the representation the server answered with.
        """
        path = self._build_path("orgs/{org}", org=name)
        request = self._http.new_request("PATCH", path, org)
        updated, response = await self._http.do(request, Organization)
        return updated if updated is not None else Organization(), response
