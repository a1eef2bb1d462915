"""Data models for the documentation search service."""

from .entry import SearchEntry
from .response import (
    SearchResult,
    SearchHit,
    SearchResponse,
    IndexRebuildResponse,
    ErrorResponse,
    HealthResponse,
)
from .request import SearchRequest

__all__ = [
    "SearchEntry",
    "SearchResult",
    "SearchHit",
    "SearchResponse",
    "IndexRebuildResponse",
    "ErrorResponse",
    "HealthResponse",
    "SearchRequest",
]
