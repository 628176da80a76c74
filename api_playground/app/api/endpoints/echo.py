"""
Echo endpoints: reflect the request back so learners can see exactly
what their client sent.

``POST /api/echo`` returns a curated view (a few interesting headers,
with absent ones reported as ``"not provided"``).  Any method on
``/api/echo`` or ``/api/echo/{anything}`` returns the raw view with
every header and the path parameters.
"""

import json
from typing import Any, Dict, Optional

from fastapi import APIRouter, Request

from api_playground.app.core.utils import iso_timestamp

router = APIRouter()

ECHO_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]
NOT_PROVIDED = "not provided"


async def read_body(request: Request) -> Any:
    """Decode the request body according to its content type.

    JSON bodies become objects, form bodies become a mapping of field
    names to values and anything else is returned as text.  An empty
    body gives an empty object.
    """
    content_type = request.headers.get("content-type", "")
    if "application/x-www-form-urlencoded" in content_type or "multipart/form-data" in content_type:
        form = await request.form()
        return {
            key: value if isinstance(value, str) else value.filename
            for key, value in form.multi_items()
        }
    raw = await request.body()
    if not raw:
        return {}
    text = raw.decode("utf-8", errors="replace")
    if "json" in content_type:
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


def request_url(request: Request) -> str:
    """Path plus query string, as sent by the client."""
    query = request.url.query
    return f"{request.url.path}?{query}" if query else request.url.path


@router.post("")
async def echo(request: Request) -> Dict[str, Any]:
    """Echo back the method, URL, selected headers, body and query."""
    headers = request.headers
    return {
        "success": True,
        "message": "Here's what I received from you!",
        "yourRequest": {
            "method": request.method,
            "url": request_url(request),
            "headers": {
                "content-type": headers.get("content-type"),
                "user-agent": headers.get("user-agent"),
                "authorization": headers.get("authorization") or NOT_PROVIDED,
                "x-custom-header": headers.get("x-custom-header") or NOT_PROVIDED,
            },
            "body": await read_body(request),
            "query": dict(request.query_params),
            "timestamp": iso_timestamp(),
        },
    }


@router.api_route("", methods=ECHO_METHODS)
@router.api_route("/{anything}", methods=ECHO_METHODS)
async def echo_any(request: Request, anything: Optional[str] = None) -> Dict[str, Any]:
    """Echo any method, including every header and the path parameters."""
    return {
        "success": True,
        "yourRequest": {
            "method": request.method,
            "url": request_url(request),
            "params": {"anything": anything} if anything is not None else {},
            "query": dict(request.query_params),
            "headers": dict(request.headers),
            "body": await read_body(request),
        },
    }
