"""
Canned explanations for the status-code simulator.

``describe_status`` looks a code up in a fixed table of well-known
codes and falls back to a generic "Unknown" entry.  The range check in
``validate_status_code`` keeps the simulator to codes that can end an
HTTP exchange: 1xx codes are informational and would leave the client
waiting for a final response, and codes above 999 do not fit the
three-digit status line.
"""

from typing import Dict, Optional

from ..core.errors import ValidationError

MIN_STATUS_CODE = 200
MAX_STATUS_CODE = 999

# Codes whose responses must not carry a body.
BODYLESS_STATUS_CODES = frozenset({204, 304})

STATUS_MESSAGES: Dict[int, Dict[str, str]] = {
    200: {"meaning": "OK", "description": "The request was successful"},
    201: {"meaning": "Created", "description": "A new resource was created"},
    204: {"meaning": "No Content", "description": "Success, but no content to return"},
    301: {"meaning": "Moved Permanently", "description": "Resource has moved to a new URL"},
    304: {"meaning": "Not Modified", "description": "Cached version is still valid"},
    400: {"meaning": "Bad Request", "description": "The request was malformed or invalid"},
    401: {"meaning": "Unauthorized", "description": "Authentication is required"},
    403: {"meaning": "Forbidden", "description": "You don't have permission"},
    404: {"meaning": "Not Found", "description": "The resource doesn't exist"},
    405: {"meaning": "Method Not Allowed", "description": "HTTP method not supported for this endpoint"},
    409: {"meaning": "Conflict", "description": "Request conflicts with current state"},
    429: {"meaning": "Too Many Requests", "description": "Rate limit exceeded"},
    500: {"meaning": "Internal Server Error", "description": "Something went wrong on the server"},
    502: {"meaning": "Bad Gateway", "description": "Invalid response from upstream server"},
    503: {"meaning": "Service Unavailable", "description": "Server is temporarily unavailable"},
}

UNKNOWN_STATUS = {"meaning": "Unknown", "description": "Not a standard status code"}

STATUS_TIP = "Try different codes: 200, 201, 400, 401, 403, 404, 500"


def validate_status_code(code: Optional[int], raw: str) -> int:
    if code is None or not MIN_STATUS_CODE <= code <= MAX_STATUS_CODE:
        raise ValidationError(
            "Status code must be a number between %d and %d" % (MIN_STATUS_CODE, MAX_STATUS_CODE),
            received=raw,
            tip=STATUS_TIP,
        )
    return code


def describe_status(code: int) -> Dict[str, str]:
    """Return ``meaning`` and ``description`` for ``code``."""
    return dict(STATUS_MESSAGES.get(code, UNKNOWN_STATUS))
