"""Entry point for the School Portal API.

Serves the FastAPI application with Uvicorn.  It is intended to be
executed from the project root, for example under Docker, where you
only specify a single Python file to run.

Host, port, database location and log level are read from the
environment (``HOST``, ``PORT``, ``DATABASE_URL``, ``LOG_LEVEL``); see
``school_portal_api/app/core/config.py`` for defaults.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from school_portal_api.app.core.config import settings
from school_portal_api.app.main import app


async def main() -> None:
    """Start the API server and block until it stops."""
    config = Config(app=app, host=settings.host, port=settings.port, reload=False, log_level=settings.log_level.lower())
    server = Server(config)
    logging.getLogger(__name__).info("Server running at http://%s:%s/", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
