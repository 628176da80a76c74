"""
Top-level router.

Aggregates the endpoint routers.  When new endpoint groups are added,
include their routers here.
"""

from fastapi import APIRouter

from .endpoints import books, echo, root, search, status_codes, users, utilities

router = APIRouter()

router.include_router(root.router, tags=["root"])
router.include_router(books.router, prefix="/api/books", tags=["books"])
router.include_router(search.router, prefix="/api/search", tags=["search"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
router.include_router(echo.router, prefix="/api/echo", tags=["echo"])
router.include_router(status_codes.router, prefix="/api/status", tags=["status"])
# Utility routes define their own paths (/slow, /random, ...).
router.include_router(utilities.router, prefix="/api", tags=["utilities"])
