"""
Main entrypoint for the API playground.

This module assembles the FastAPI application: logging, CORS, request
logging, the JSON error envelope and the routers.  ``create_app``
builds and configures an app around its own freshly seeded
``ResourceStore``; a default instance is created at import time as
``app`` so it can be served directly, e.g.::

    uvicorn api_playground.app.main:app --reload
"""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router
from .core.config import Settings, settings as default_settings
from .core.errors import PlaygroundError
from .core.logging_config import log_requests, setup_logging
from .services.store import ResourceStore

logger = logging.getLogger(__name__)


def _error(status_code: int, body: Dict[str, Any]) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=jsonable_encoder({"success": False, **body}))


async def handle_playground_error(request: Request, exc: PlaygroundError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_dict()))


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Malformed JSON, or a value of the wrong type (e.g. ?limit=abc).
    return _error(
        status.HTTP_400_BAD_REQUEST,
        {
            "error": "Invalid request",
            "details": [
                {"location": list(err.get("loc", ())), "message": err.get("msg")}
                for err in exc.errors()
            ],
            "tip": "Check the types of the values you sent",
        },
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return _error(
            status.HTTP_404_NOT_FOUND,
            {
                "error": "Endpoint not found",
                "requestedUrl": request.url.path,
                "method": request.method,
                "tip": "Visit / to see all available endpoints",
            },
        )
    return _error(exc.status_code, {"error": str(exc.detail)})


async def catch_unhandled_errors(request: Request, call_next):
    """Last-resort handler turning any uncaught exception into a 500."""
    try:
        return await call_next(request)
    except Exception as exc:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return _error(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            {"error": "Internal server error", "message": str(exc)},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module-level settings
        read from the environment.

    Returns
    -------
    FastAPI
        A configured application with a freshly seeded store on
        ``app.state.store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings
    app.state.store = ResourceStore()

    app.add_exception_handler(PlaygroundError, handle_playground_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)

    # Middleware added last runs first: requests are logged around the
    # 500 fallback so failed requests still get a log line.
    app.middleware("http")(catch_unhandled_errors)
    app.middleware("http")(log_requests)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    logger.debug("Application %s %s created", settings.project_name, settings.api_version)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
