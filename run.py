"""Entry point for the API playground.

Starts the FastAPI application under Uvicorn.  Host, port and log
level come from the environment (``HOST``, ``PORT``, ``LOG_LEVEL``; see
``api_playground.app.core.config``), defaulting to ``0.0.0.0:3000``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from api_playground.app.core.config import settings
from api_playground.app.main import app


async def main() -> None:
    """Serve the playground until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "%s listening on http://localhost:%s", settings.project_name, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
