"""Response models for search results and API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from .entry import SearchEntry


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResult(BaseModel):
    """A ranked match for a single query."""

    entry: SearchEntry = Field(..., description="The matched entry")
    score: float = Field(..., ge=0.0, description="Accumulated relevance score")


class SearchHit(BaseModel):
    """Search result as rendered for the documentation UI."""

    id: str = Field(..., description="Entry identifier")
    title: str = Field(..., description="Entry title")
    path: str = Field(..., description="Navigation link")
    category: str = Field(..., description="Classification label")
    score: float = Field(..., description="Relevance score")
    highlighted_title: str = Field(..., description="Title with matched terms emphasized")
    snippet: str = Field(..., description="Content excerpt with matched terms emphasized")


class SearchResponse(BaseModel):
    """Response for documentation search queries."""

    query: str = Field(..., description="Original search query")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    total_results: int = Field(..., description="Number of results returned")
    results: List[SearchHit] = Field(..., description="Ranked search results")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class IndexRebuildResponse(BaseModel):
    """Response for index rebuilds."""

    message: str = Field(..., description="Outcome message")
    total_entries: int = Field(..., description="Entries in the new index")
    total_tokens: int = Field(..., description="Distinct tokens in the new index")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    index_stats: Dict[str, Any] = Field(..., description="Statistics of the current index")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
