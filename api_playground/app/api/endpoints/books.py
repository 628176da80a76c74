"""
Book endpoints.

Full CRUD over the in-memory book collection, one route per HTTP
method, so learners can compare what GET, POST, PUT, PATCH and DELETE
do to the same resource.  Path identifiers are parsed loosely: a value
without a leading integer simply matches no book and yields 404.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request, status

from api_playground.app.core.utils import coerce_int, coerce_query_int
from api_playground.app.schemas.book import BookCreate, BookReplace, BookUpdate
from api_playground.app.services.store import ResourceStore, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def list_books(
    request: Request,
    genre: Optional[str] = Query(None, description="Case-insensitive genre filter"),
    sort: Optional[str] = Query(None, description="Field to sort by: title, author, year, genre or id"),
    limit: Optional[str] = Query(None, description="Maximum number of results"),
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Return all books, optionally filtered, sorted and limited.

    Example: ``/api/books?genre=Technology&limit=2``
    """
    books = store.books.list_books(genre=genre, sort=sort, limit=coerce_query_int(limit))
    return {
        "success": True,
        "count": len(books),
        "queryParams": dict(request.query_params),
        "data": books,
    }


@router.get("/{book_id}", response_model=Dict[str, Any])
async def get_book(book_id: str, store: ResourceStore = Depends(get_store)) -> Dict[str, Any]:
    """Return a single book; the ``book_id`` path segment identifies it."""
    book = store.books.get_book(coerce_int(book_id))
    return {"success": True, "pathParam": book_id, "data": book}


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_book(
    book_in: Optional[BookCreate] = None,
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Create a book from a JSON body with at least ``title`` and ``author``."""
    book = store.books.create_book(book_in or BookCreate())
    return {"success": True, "message": "Book created successfully!", "data": book}


@router.put("/{book_id}", response_model=Dict[str, Any])
async def replace_book(
    book_id: str,
    book_in: Optional[BookReplace] = None,
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Replace a book completely; all four fields must be sent."""
    book = store.books.replace_book(coerce_int(book_id), book_in or BookReplace())
    return {
        "success": True,
        "message": "Book replaced completely!",
        "method": "PUT - Full replacement",
        "data": book,
    }


@router.patch("/{book_id}", response_model=Dict[str, Any])
async def update_book(
    book_id: str,
    book_in: Optional[BookUpdate] = None,
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Update only the fields present in the body."""
    result = store.books.update_book(coerce_int(book_id), book_in or BookUpdate())
    return {
        "success": True,
        "message": "Book updated!",
        "method": "PATCH - Partial update",
        "previous": result.previous,
        "updated": result.updated,
        "fieldsChanged": result.fields_changed,
    }


@router.delete("/{book_id}", response_model=Dict[str, Any])
async def delete_book(book_id: str, store: ResourceStore = Depends(get_store)) -> Dict[str, Any]:
    """Delete a book and return it.

    Responds 200 with the removed book rather than 204 so the learner
    can see what was deleted.
    """
    book = store.books.delete_book(coerce_int(book_id))
    return {"success": True, "message": "Book deleted successfully!", "deletedBook": book}
