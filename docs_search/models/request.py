"""Request models for API endpoints."""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """Request model for search queries."""

    query: str = Field(..., min_length=1, max_length=200, description="Search query")
    limit: Optional[int] = Field(
        None, ge=1, le=100, description="Maximum number of results to return"
    )

    @field_validator("query")
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate and trim query input."""
        if not v or not v.strip():
            raise ValueError("Query cannot be empty")
        return v.strip()
