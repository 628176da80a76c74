"""Payload for ``POST /api/calculate``."""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CalculationRequest(BaseModel):
    # Operands are left untyped so that "5" or true reach the service
    # unchanged and are rejected there, instead of being coerced.
    operation: Optional[str] = Field(None, example="multiply")
    a: Any = Field(None, example=7)
    b: Any = Field(None, example=8)
