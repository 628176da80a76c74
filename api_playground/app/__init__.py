"""
Application package initializer.

The playground is organised like a larger API: settings, logging,
credential checks and error types live in ``core``, request/response
models in ``schemas``, the in-memory store and other logic in
``services`` and the HTTP routes in ``api/endpoints``.
"""

from .main import app, create_app  # noqa: F401
