"""Main FastAPI application entry point."""

import logging
import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.core.config import Settings, settings
from app.core.errors import error_response, register_exception_handlers, request_target
from app.core.logging import setup_logging
from app.services.connection_manager import ConnectionManager
from app.services.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    config: Settings = app.state.settings
    setup_logging(config.LOG_LEVEL)
    app.state.store.reset()
    logger.info("🚀 Server running on port %s...", config.PORT)
    logger.info("📦 Inventory loaded with %d items", len(app.state.store))

    yield

    logger.info("🛑 Shutting down (%d clients connected)", app.state.connection_manager.active_connections)


def create_app(config: Settings | None = None) -> FastAPI:
    """Build the application with its own store and connection registry."""
    config = config or settings

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        description=config.DESCRIPTION,
        debug=config.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = config
    app.state.store = InventoryStore()
    app.state.connection_manager = ConnectionManager()

    # Configurar CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def access_log(request: Request, call_next) -> Response:
        """Log one line per request; unhandled errors become a 500 body."""
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            response = error_response(request, status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
        elapsed_ms = (time.perf_counter() - start) * 1000
        logger.info(
            "%s %s %s - %dms",
            response.status_code,
            request.method,
            request_target(request),
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    app.include_router(api_router)

    @app.get("/", tags=["Health"])
    async def root() -> dict[str, str]:
        """Root endpoint - service information."""
        return {
            "message": f"Welcome to {config.PROJECT_NAME}",
            "status": "running",
            "version": config.VERSION,
        }

    @app.get("/health", tags=["Health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn."""
    setup_logging(settings.LOG_LEVEL)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
