"""Application entrypoint for the message processor service.

This module builds the FastAPI application around the explicit `/process`
router and the plain-text error handlers. `app` is created once at import so
`uvicorn message_processor.main:app` works; `server.serve` receives the same
object when the service is started through the console script.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from message_processor.api.routes import process_router
from message_processor.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

INVALID_METHOD_TEXT = "Invalid request method"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log when the application starts accepting and stops serving requests."""
    logger.info("%s %s ready", app.title, app.version)
    yield
    logger.info("%s shutting down", app.title)


async def bad_request_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Return the decode error text as a plain-text 400 body."""
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """Answer non-POST verbs with a short plain-text 405, keeping the Allow header."""
    return PlainTextResponse(INVALID_METHOD_TEXT, status_code=exc.status_code, headers=exc.headers)


def create_application(settings: Settings | None = None) -> FastAPI:
    """Assemble and configure the FastAPI application instance.

    - Stores `settings` on `app.state` for the dependency providers.
    - Disables the docs routes unless `ENABLE_DOCS` is set, so any path other
      than `/process` falls through to 404.
    - Registers the process router, the only dispatch table of the service.
    """

    settings = settings or default_settings
    docs_enabled = settings.ENABLE_DOCS

    application = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.PROJECT_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        exception_handlers={
            status.HTTP_400_BAD_REQUEST: bad_request_handler,
            status.HTTP_405_METHOD_NOT_ALLOWED: method_not_allowed_handler,
        },
    )
    application.state.settings = settings

    application.include_router(process_router)

    return application


app = create_application()
