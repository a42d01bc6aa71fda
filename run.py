"""Entry point for the EvePlanner API server.

Starts the FastAPI application with Uvicorn.  Intended to be executed
from the project root, for example under Docker or a process manager
where only a single Python file is specified.

Host and port come from the ``HOST`` and ``PORT`` environment variables
(defaults ``0.0.0.0`` and ``5000``); everything else is read by
``eveplanner_api.app.core.config``.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from eveplanner_api.app.core.config import settings
from eveplanner_api.app.main import app


async def run_api() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Server running on http://%s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
