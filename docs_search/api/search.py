"""Documentation search API endpoints."""

import time
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request

from ..config import get_settings
from ..core.engine import SearchEngine
from ..core.highlighter import Highlighter
from ..core.index import DuplicateEntryError
from ..index_holder import IndexHolder
from ..models.entry import SearchEntry
from ..models.request import SearchRequest
from ..models.response import (
    ErrorResponse,
    IndexRebuildResponse,
    SearchHit,
    SearchResponse,
)

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()
logger = structlog.get_logger(__name__)

search_engine = SearchEngine()
highlighter = Highlighter()


def get_index_holder(request: Request) -> IndexHolder:
    """Get the index holder owned by the running application."""
    return request.app.state.index_holder


def run_search(holder: IndexHolder, query: str, limit: int) -> SearchResponse:
    """
    Search the current index and render hits for display.

    Args:
        holder: Holder of the current index
        query: Free-text query
        limit: Maximum number of results

    Returns:
        SearchResponse with highlighted titles and snippets
    """
    start_time = time.time()

    # One reference for the whole request, even if a rebuild swaps it meanwhile
    index = holder.index
    results = search_engine.search(index, query, limit)

    hits = []
    for result in results:
        entry = result.entry
        snippet = highlighter.excerpt(
            entry.content, query, radius=settings.snippet_radius, highlight=True
        )
        hits.append(
            SearchHit(
                id=entry.id,
                title=entry.title,
                path=entry.path,
                category=entry.category,
                score=result.score,
                highlighted_title=highlighter.highlight(entry.title, query),
                snippet=snippet,
            )
        )

    execution_time = (time.time() - start_time) * 1000
    logger.debug("Search completed", query=query, total_results=len(hits))

    return SearchResponse(
        query=query,
        execution_time_ms=execution_time,
        total_results=len(hits),
        results=hits,
    )


@router.get(
    "/docs/search",
    response_model=SearchResponse,
    summary="Search documentation",
    description="Search documentation entries; title matches rank above keyword and content matches"
)
async def search_docs(
    q: str = Query("", description="Free-text search query"),
    limit: Optional[int] = Query(
        None,
        ge=1,
        le=100,
        description="Maximum number of results to return"
    ),
    holder: IndexHolder = Depends(get_index_holder),
) -> SearchResponse:
    """
    Search documentation entries.

    An empty query is not an error; it returns an empty result list.
    """
    if len(q) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    return run_search(holder, q, limit or settings.max_results)


@router.post(
    "/docs/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search documentation entries using a structured request body"
)
async def search_docs_with_body(
    request: SearchRequest,
    holder: IndexHolder = Depends(get_index_holder),
) -> SearchResponse:
    """Search documentation entries using a JSON request body."""
    if len(request.query) > settings.max_query_length:
        raise HTTPException(
            status_code=400,
            detail=f"Query too long. Maximum length is {settings.max_query_length} characters"
        )

    return run_search(holder, request.query, request.limit or settings.max_results)


@router.post(
    "/docs/index",
    response_model=IndexRebuildResponse,
    summary="Rebuild the search index",
    description="Replace the whole index with one built from the posted entry list"
)
async def rebuild_index(
    entries: List[SearchEntry],
    holder: IndexHolder = Depends(get_index_holder),
) -> IndexRebuildResponse:
    """
    Rebuild the index from a complete entry list.

    The previous index keeps serving until the new one is fully built.
    """
    try:
        index = holder.rebuild(entries)
    except DuplicateEntryError as e:
        raise HTTPException(
            status_code=422,
            detail=ErrorResponse(
                error="Duplicate Entry",
                message=str(e),
                details={"id": e.entry_id},
            ).model_dump(mode="json")
        )

    stats = index.get_stats()
    return IndexRebuildResponse(
        message="Index rebuilt successfully",
        total_entries=stats["total_entries"],
        total_tokens=stats["total_tokens"],
    )


@router.get(
    "/docs/entries/{entry_id}",
    response_model=SearchEntry,
    summary="Get documentation entry",
    description="Get a single indexed entry by id"
)
async def get_entry(
    entry_id: str = Path(..., description="Entry identifier"),
    holder: IndexHolder = Depends(get_index_holder),
) -> SearchEntry:
    """Get an indexed entry by id."""
    entry = holder.index.entries.get(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=404,
            detail=f"Entry '{entry_id}' not found in index"
        )
    return entry
