"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import uuid4

from fastapi import FastAPI, Request

from cooklist import __version__
from cooklist.config import get_settings
from cooklist.logging_config import LoggingContext, configure_logging, get_logger
from cooklist.routers import recipes_router, shopping_list_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    settings = get_settings()
    configure_logging(
        settings.log_level,
        json_format=settings.log_format == "json",
        log_file=settings.log_file,
    )
    logger.info(f"Serving recipes from {settings.recipes_dir.resolve()}")

    yield

    logger.info("Shutting down cooklist server")


app = FastAPI(
    title="cooklist",
    description="Cooklang recipes and shopping lists",
    version=__version__,
    lifespan=lifespan,
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log line of a request with a request id."""
    with LoggingContext(request_id=uuid4().hex):
        return await call_next(request)


app.include_router(recipes_router)
app.include_router(shopping_list_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "cooklist"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "cooklist",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
