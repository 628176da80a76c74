"""Welcome endpoint listing everything the playground offers."""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from api_playground.app.core.config import Settings, get_settings

router = APIRouter()

AVAILABLE_ENDPOINTS = [
    "GET    /api/books          - Get all books",
    "GET    /api/books/:id      - Get a specific book",
    "POST   /api/books          - Create a new book",
    "PUT    /api/books/:id      - Replace a book completely",
    "PATCH  /api/books/:id      - Update specific book fields",
    "DELETE /api/books/:id      - Delete a book",
    "GET    /api/search         - Search with query parameters",
    "GET    /api/users          - Get users (requires auth header)",
    "POST   /api/users          - Create a user (requires X-API-Key header)",
    "POST   /api/echo           - Echo back your request",
    "GET    /api/status/:code   - Get different status codes",
    "GET    /api/slow           - Simulates a slow API response",
    "GET    /api/random         - Get random data",
    "POST   /api/calculate      - Do some arithmetic",
    "POST   /api/form           - Submit form data",
]


@router.get("/")
async def welcome(settings: Settings = Depends(get_settings)) -> Dict[str, Any]:
    return {
        "success": True,
        "message": f"Welcome to {settings.project_name}!",
        "version": settings.api_version,
        "tip": "Try visiting /api/books to see a list of books",
        "availableEndpoints": AVAILABLE_ENDPOINTS,
    }
