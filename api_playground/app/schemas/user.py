"""
Pydantic models for user data.

Users only have a username, an e-mail and a role.  There are no
passwords: the users endpoints exist to demonstrate sending
credentials in headers, not to manage accounts.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for ``POST /api/users``; ``username`` and ``email`` are required."""

    username: Optional[str] = Field(None, example="newuser")
    email: Optional[str] = Field(None, example="newuser@example.com")
    role: Optional[str] = Field(None, example="student")


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str
    role: str
