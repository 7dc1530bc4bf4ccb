from github_client.endpoints.organizations import OrganizationsClient

__all__ = ["OrganizationsClient"]
