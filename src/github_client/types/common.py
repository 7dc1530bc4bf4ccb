from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ListOptions(BaseModel):
    """Pagination options for list endpoints; each is applied only when set."""

    page: Optional[int] = Field(None, ge=1, description="Page of results to fetch")
    per_page: Optional[int] = Field(None, ge=1, le=100, description="Results per page")


class Rate(BaseModel):
    """Rate limit state reported by the API on every response."""

    limit: Optional[int] = None
    remaining: Optional[int] = None
    reset: Optional[datetime] = None
