"""
Main entrypoint for the School Portal API.

This module assembles the FastAPI application, sets up logging,
registers error handlers and includes the API router.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn school_portal_api.app.main:app --reload

The database handle is opened when the application starts and closed
when it stops; it lives on ``app.state.db`` in between.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from .api.router import router
from .core.config import settings
from .core.db import Database, get_database_path
from .core.errors import ServiceError
from .core.logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(database: Optional[Database] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    database : Optional[Database]
        Database handle to serve from.  Defaults to a SQLite database at
        ``settings.database_url``.  The application opens it on startup
        and closes it on shutdown.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    setup_logging(settings.log_level, settings.log_file or None)

    db = database or Database(get_database_path())

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        db.open()
        app.state.db = db
        try:
            yield
        finally:
            db.close()

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)

    @app.exception_handler(ServiceError)
    async def service_error_handler(request: Request, exc: ServiceError) -> PlainTextResponse:
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
        logger.info(
            "Rejected %s %s: invalid fields %s",
            request.method,
            request.url.path,
            [error.get("loc") for error in exc.errors()],
        )
        return PlainTextResponse("Ongeldige aanvraag", status_code=status.HTTP_400_BAD_REQUEST)

    app.include_router(router)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
