"""
kvgate - FastAPI Application

Login with registration on first use, plus item CRUD, over a single
key-value store.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from kvgate import __version__
from kvgate.config import get_settings
from kvgate.database.connections import create_store
from kvgate.database.store import KeyValueStore
from kvgate.routers import auth, health, items

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


async def invalid_body_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer unparsable or incomplete request bodies with 400."""
    logger.warning("Invalid request body on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "invalid request body"},
    )


def create_app(store: Optional[KeyValueStore] = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        store: Store to serve from. When omitted, the lifespan creates the
            configured store on startup and closes it on shutdown.

    Returns:
        FastAPI application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan manager.

        Startup:
        - Configure logging
        - Create the key-value store unless one was injected

        Shutdown:
        - Close the store if this lifespan created it
        """
        settings = get_settings()
        configure_logging(settings.log_level)
        logger.info("Starting up kvgate...")

        owned = getattr(app.state, "store", None) is None
        if owned:
            app.state.store = create_store(settings)

        yield

        logger.info("Shutting down kvgate...")
        if owned:
            await app.state.store.close()
            app.state.store = None
            logger.info("Store connection closed")

    app = FastAPI(
        title="kvgate API",
        description="""
## Login and item storage API

### Login
`POST /login` with `{"loginID": ..., "password": ...}`. The first login for
an identifier registers it (201) for 10 minutes; later logins verify the
password (200 or 401).

### Items
`POST /items`, `GET/PUT/DELETE /items/{id}` store plain string values
that never expire.
        """,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_exception_handler(RequestValidationError, invalid_body_handler)

    app.include_router(health.router)
    app.include_router(auth.router)
    app.include_router(items.router)

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API information."""
        return {
            "name": "kvgate API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
