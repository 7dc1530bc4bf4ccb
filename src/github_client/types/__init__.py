from github_client.types.base import GitHubModel
from github_client.types.common import ListOptions, Rate
from github_client.types.organizations import Organization, Plan

__all__ = [
    "GitHubModel",
    "ListOptions",
    "Rate",
    "Organization",
    "Plan",
]
