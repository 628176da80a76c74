"""
Error kinds raised by the service layer and the security helpers.

Every error carries the HTTP status it maps to, a short ``error``
message, an optional ``tip`` telling the learner how to fix the
request, and any extra keys that should appear in the JSON body.  The
application installs a single exception handler (see ``main``) that
renders these into the ``{"success": false, ...}`` envelope.
"""

from typing import Any, Dict, Optional

from fastapi import status


class PlaygroundError(Exception):
    """Base class for errors that become JSON error responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, *, tip: Optional[str] = None, **extra: Any) -> None:
        super().__init__(error)
        self.error = error
        self.tip = tip
        self.extra = extra

    def to_dict(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"success": False, "error": self.error}
        body.update(self.extra)
        if self.tip:
            body["tip"] = self.tip
        return body


class ValidationError(PlaygroundError):
    """Missing or invalid required input."""

    status_code = status.HTTP_400_BAD_REQUEST


class Unauthenticated(PlaygroundError):
    """No (or an unusable) credential was supplied."""

    status_code = status.HTTP_401_UNAUTHORIZED


class Forbidden(PlaygroundError):
    """A credential was supplied but it is not the expected one."""

    status_code = status.HTTP_403_FORBIDDEN


class NotFound(PlaygroundError):
    """No entry exists with the requested identifier."""

    status_code = status.HTTP_404_NOT_FOUND
