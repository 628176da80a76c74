"""
Credential checks for the users endpoints.

The playground demonstrates two common ways of sending credentials:

* an ``Authorization: Bearer <token>`` header, which gates reading the
  user list, and
* a custom ``X-API-Key`` header, which gates creating users.

Both are plain string comparisons against values from ``Settings``;
there is no token issuing, expiry or user lookup.  The comparisons use
``hmac.compare_digest`` so the check takes the same time regardless of
how much of the value matches.
"""

import hmac
from typing import Optional

from fastapi import Depends, Header

from .config import Settings, get_settings
from .errors import Forbidden, Unauthenticated


def _matches(candidate: str, expected: str) -> bool:
    return hmac.compare_digest(candidate.encode("utf-8"), expected.encode("utf-8"))


def require_bearer_token(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency enforcing ``Authorization: Bearer <configured token>``.

    A missing header raises ``Unauthenticated`` (401).  A header with
    any other value, including a different scheme, raises ``Forbidden``
    (403).  Returns the header value on success.
    """
    expected = f"Bearer {settings.bearer_token}"
    if not authorization:
        raise Unauthenticated(
            "No authorization header provided",
            tip=f"Add header: Authorization: {expected}",
        )
    if not _matches(authorization, expected):
        raise Forbidden("Invalid token", received=authorization, expected=expected)
    return authorization


def require_api_key(
    x_api_key: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> str:
    """Dependency enforcing ``X-API-Key: <configured key>``.

    Unlike the bearer check, a missing and a wrong key are treated the
    same way and both raise ``Unauthenticated`` (401).
    """
    if x_api_key is None or not _matches(x_api_key, settings.api_key):
        raise Unauthenticated(
            "Invalid or missing X-API-Key header",
            tip=f"Add header: X-API-Key: {settings.api_key}",
        )
    return x_api_key
