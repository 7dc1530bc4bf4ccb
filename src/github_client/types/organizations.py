from datetime import datetime
from typing import Optional

from pydantic import Field

from github_client.types.base import GitHubModel


class Plan(GitHubModel):
    """Payment plan of an account."""

    name: Optional[str] = Field(None, description="Plan name")
    space: Optional[int] = Field(None, description="Disk space allowance")
    collaborators: Optional[int] = Field(None, description="Collaborator allowance")
    private_repos: Optional[int] = Field(None, description="Private repository allowance")


class Organization(GitHubModel):
    """A GitHub organization account."""

    login: Optional[str] = Field(None, description="Organization login")
    id: Optional[int] = Field(None, description="Numeric identifier")
    url: Optional[str] = Field(None, description="API URL")
    html_url: Optional[str] = Field(None, description="Web URL")
    avatar_url: Optional[str] = Field(None, description="Avatar image URL")
    name: Optional[str] = Field(None, description="Display name")
    company: Optional[str] = Field(None, description="Company")
    blog: Optional[str] = Field(None, description="Blog URL")
    location: Optional[str] = Field(None, description="Location")
    email: Optional[str] = Field(None, description="Public email")
    description: Optional[str] = Field(None, description="Short description")
    type: Optional[str] = Field(None, description="Account type")
    public_repos: Optional[int] = Field(None, description="Number of public repositories")
    public_gists: Optional[int] = Field(None, description="Number of public gists")
    followers: Optional[int] = Field(None, description="Follower count")
    following: Optional[int] = Field(None, description="Following count")
    created_at: Optional[datetime] = Field(None, description="Creation timestamp")
    updated_at: Optional[datetime] = Field(None, description="Update timestamp")
    total_private_repos: Optional[int] = Field(None, description="Private repositories, all owners")
    owned_private_repos: Optional[int] = Field(None, description="Private repositories owned")
    private_gists: Optional[int] = Field(None, description="Number of private gists")
    disk_usage: Optional[int] = Field(None, description="Disk usage in kilobytes")
    collaborators: Optional[int] = Field(None, description="Collaborator count")
    billing_email: Optional[str] = Field(None, description="Billing email (admins only)")
    plan: Optional[Plan] = Field(None, description="Payment plan")
