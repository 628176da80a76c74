"""
Business logic for users.

The ``UserService`` stores users in memory and supports only creating
and listing them; there is no lookup, update or delete.  Ids come from
a counter that only increases.
"""

import logging
from typing import Iterable, List

from ..core.errors import ValidationError
from ..schemas.user import UserCreate, UserRead

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "student"


class UserService:
    """In-memory collection of users."""

    def __init__(self, seed: Iterable[UserRead] = ()) -> None:
        self._users: List[UserRead] = [user.model_copy() for user in seed]
        self._next_id = max((user.id for user in self._users), default=0) + 1

    def __len__(self) -> int:
        return len(self._users)

    def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        return list(self._users)

    def create_user(self, data: UserCreate) -> UserRead:
        """Append a new user; ``role`` defaults to ``"student"``."""
        if not data.username or not data.email:
            raise ValidationError("Missing required fields: username, email")
        user = UserRead(
            id=self._next_id,
            username=data.username,
            email=data.email,
            role=data.role or DEFAULT_ROLE,
        )
        self._next_id += 1
        self._users.append(user)
        logger.info("Registered user %s (%s)", user.id, user.username)
        return user
