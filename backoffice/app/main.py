"""
FastAPI Application Entry Point.

This is the main application file for the Transaction Back-Office service.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from backoffice.app.core.config import settings
from backoffice.app.core.observability import ObservabilityMiddleware, configure_logging
from backoffice.app.api.router import router as api_router
from backoffice.app.api.endpoints import frontend
from backoffice.app.db.bootstrap import init_db
from backoffice.app.db.store import Store
from backoffice.app.core.exceptions import (
    AppException,
    app_exception_handler,
    http_exception_handler,
    validation_exception_handler,
    generic_exception_handler
)

logger = logging.getLogger("backoffice")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup/shutdown.

    1. Builds the Store and bootstraps the database. A StoreFatalError
       propagates so the server aborts startup.
    2. Disposes the engine on shutdown.
    """
    configure_logging(settings.log_level)
    if settings.secret_key_generated:
        logger.warning("SECRET_KEY is not set; using a random key. Tokens will not survive a restart.")

    store = Store.from_url(settings.database_url, echo=settings.db_echo)
    try:
        await init_db(store)
    except Exception:
        await store.dispose()
        raise
    app.state.store = store
    logger.info("%s ready on port %s", settings.app_name, settings.port)

    yield

    await store.dispose()


# Initialize FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.api_version,
    debug=settings.debug,
    description="Back-office API for customer deposit/withdraw transactions",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(ObservabilityMiddleware)

# Register global exception handlers
app.add_exception_handler(AppException, app_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        dict: Status and application information
    """
    return {
        "status": "healthy",
        "app_name": settings.app_name,
        "version": settings.api_version,
    }


app.include_router(api_router, prefix="/api")
app.include_router(frontend.router)

# Remaining front-end assets; mounted last so API routes take precedence
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir), name="static")


def run():
    """Start the service with uvicorn on the configured host and port."""
    uvicorn.run(
        "backoffice.app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
