"""
Status code simulator.

``GET /api/status/{code}`` answers with the requested code as the real
HTTP status, plus a short explanation of what the code means.
"""

from fastapi import APIRouter, Response
from fastapi.responses import JSONResponse

from api_playground.app.core.utils import coerce_int
from api_playground.app.services.status_service import (
    BODYLESS_STATUS_CODES,
    STATUS_TIP,
    describe_status,
    validate_status_code,
)

router = APIRouter()


@router.get("/{code}")
async def simulate_status(code: str) -> Response:
    """Respond with status ``code``.

    204 and 304 responses cannot carry a body, so for those only the
    status line is sent.
    """
    status_code = validate_status_code(coerce_int(code), code)
    if status_code in BODYLESS_STATUS_CODES:
        return Response(status_code=status_code)
    content = {"statusCode": status_code, **describe_status(status_code), "tip": STATUS_TIP}
    return JSONResponse(status_code=status_code, content=content)
