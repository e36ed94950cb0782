"""
Route definitions for the problem search API.

Endpoints:
- GET  /search?q=<keyword> : search the LeetCode catalog by title
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from .errors import ValidationError
from .leetcode_service import LeetCodeClient
from .schemas import ErrorBody, SearchResults


router = APIRouter(tags=["catalog"])


def get_catalog_client(request: Request) -> LeetCodeClient:
    """Return the client built by ``create_app`` for this application."""
    return request.app.state.catalog_client


@router.get(
    "/search",
    response_model=SearchResults,
    responses={400: {"model": ErrorBody}, 500: {"model": ErrorBody}},
)
def search(
    q: Optional[str] = Query(default=None, description="Keyword to look for in problem titles"),
    client: LeetCodeClient = Depends(get_catalog_client),
) -> SearchResults:
    """
    Returns the catalog problems whose title contains ``q``.

    The keyword is sent upstream as ``searchKeywords`` and the answer is
    then filtered again locally on the title. A missing or empty ``q``
    is rejected before anything is sent upstream. Upstream failures
    surface as ``TransportError`` and are handled in ``leetsearch.main``.
    """
    if not q:
        raise ValidationError("query parameter 'q' is missing or empty")

    problems = client.search_problems(q)
    return SearchResults(results=problems)
