"""
Utility endpoints: artificial delay, random data, calculator and form
submission.
"""

import asyncio
import random
import uuid
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query, Request

from api_playground.app.api.endpoints.echo import read_body
from api_playground.app.core.config import Settings, get_settings
from api_playground.app.core.utils import coerce_int, iso_timestamp
from api_playground.app.schemas.calculator import CalculationRequest
from api_playground.app.services.calculator_service import CalculatorService

router = APIRouter()

QUOTES = [
    "REST is a beautiful thing.",
    "APIs make the world go round.",
    "HTTP methods are your friends.",
    "Status codes tell a story.",
    "JSON is the universal language of APIs.",
]

COLORS = ["red", "blue", "green", "yellow", "purple", "orange"]


def resolve_delay(raw: Optional[str], settings: Settings) -> int:
    """Turn the ``delay`` query value into a wait in milliseconds.

    Missing, unparsable or zero values use the configured default; the
    result never exceeds the configured maximum and is never negative.
    """
    requested = coerce_int(raw) or settings.slow_default_delay_ms
    return max(0, min(requested, settings.slow_max_delay_ms))


@router.get("/slow")
async def slow_response(
    delay: Optional[str] = Query(None, description="Delay in milliseconds"),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """Wait before answering, to practise timeouts and loading states.

    Only this request is suspended; other requests keep being served
    while it waits.
    """
    actual_delay = resolve_delay(delay, settings)
    await asyncio.sleep(actual_delay / 1000)
    return {
        "success": True,
        "message": f"Response after {actual_delay}ms delay",
        "tip": "Use ?delay=5000 to wait 5 seconds",
        "timestamp": iso_timestamp(),
    }


@router.get("/random")
async def random_data() -> Dict[str, Any]:
    """Return different data on every call."""
    return {
        "success": True,
        "randomNumber": random.randrange(1000),
        "randomQuote": random.choice(QUOTES),
        "randomColor": random.choice(COLORS),
        "uuid": str(uuid.uuid4()),
        "timestamp": iso_timestamp(),
    }


@router.post("/calculate")
async def calculate(payload: Optional[CalculationRequest] = None) -> Dict[str, Any]:
    """Body: ``{"operation": "add|subtract|multiply|divide", "a": number, "b": number}``."""
    payload = payload or CalculationRequest()
    result = CalculatorService.calculate(payload.operation, payload.a, payload.b)
    return {"success": True, **result}


@router.post("/form")
async def submit_form(request: Request) -> Dict[str, Any]:
    """Accept an ``application/x-www-form-urlencoded`` (or multipart) body."""
    return {
        "success": True,
        "message": "Form data received!",
        "contentType": request.headers.get("content-type"),
        "formData": await read_body(request),
    }
