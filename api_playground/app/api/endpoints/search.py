"""
Search endpoint, a demonstration of combining several query parameters.

Example: ``/api/search?q=rest&minYear=2020&maxYear=2025``
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from api_playground.app.core.utils import coerce_query_int
from api_playground.app.services.store import ResourceStore, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def search_books(
    request: Request,
    q: Optional[str] = Query(None, description="Text matched against title, author and genre"),
    min_year: Optional[str] = Query(None, alias="minYear"),
    max_year: Optional[str] = Query(None, alias="maxYear"),
    author: Optional[str] = Query(None, description="Substring of the author's name"),
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    results = store.books.search_books(
        query=q,
        min_year=coerce_query_int(min_year),
        max_year=coerce_query_int(max_year),
        author=author,
    )
    return {
        "success": True,
        "searchCriteria": dict(request.query_params),
        "resultsFound": len(results),
        "data": results,
    }
