"""
User endpoints.

Both routes exist to show credentials travelling in request headers:
listing users needs ``Authorization: Bearer <token>`` and creating one
needs a custom ``X-API-Key`` header.  The checks themselves live in
``core.security``.
"""

from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, status

from api_playground.app.core.security import require_api_key, require_bearer_token
from api_playground.app.schemas.user import UserCreate
from api_playground.app.services.store import ResourceStore, get_store

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def list_users(
    _token: str = Depends(require_bearer_token),
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Return every user; 401 without a header, 403 with the wrong token."""
    return {
        "success": True,
        "message": "Authentication successful!",
        "data": store.users.list_users(),
    }


@router.post("", response_model=Dict[str, Any], status_code=status.HTTP_201_CREATED)
async def create_user(
    user_in: Optional[UserCreate] = None,
    _api_key: str = Depends(require_api_key),
    store: ResourceStore = Depends(get_store),
) -> Dict[str, Any]:
    """Create a user; requires the ``X-API-Key`` header."""
    user = store.users.create_user(user_in or UserCreate())
    return {"success": True, "message": "User created!", "data": user}
