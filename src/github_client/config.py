"""
Configuration settings for the GitHub client.
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from github_client.http import DEFAULT_BASE_URL, DEFAULT_USER_AGENT


class ClientSettings(BaseSettings):
    """
    Configuration for the GitHub API client.

    Settings are loaded from environment variables with GITHUB_ prefix.
    Example: GITHUB_TOKEN, GITHUB_BASE_URL, etc.
    """

    model_config = SettingsConfigDict(
        env_prefix="GITHUB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="API root, e.g. https://ghe.example.com/api/v3/ for Enterprise"
    )
    token: Optional[str] = Field(
        default=None,
        description="Personal access token"
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        description="User-Agent header sent with every request"
    )
    timeout: float = Field(
        default=30.0,
        gt=0,
        description="HTTP request timeout in seconds"
    )
