"""FastAPI application entry point."""

import logging
import typing as t
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from whereabouts.core.config import SETTINGS
from whereabouts.core.database import ASYNC_SESSION_MAKER, close_db, init_db
from whereabouts.core.globals import OPENAPI_TAGS
from whereabouts.routers import api_router
from whereabouts.services import initialize_database

logging.basicConfig(
    level=logging.DEBUG if SETTINGS.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
LOGGER: logging.Logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> t.AsyncGenerator[None, None]:
    """Application lifespan events.

    args:
        _ (FastAPI): The FastAPI application instance.
    """
    LOGGER.info("Starting Whereabouts API...")
    await init_db()
    LOGGER.info("Database tables initialized")

    async with ASYNC_SESSION_MAKER() as session:
        await initialize_database(session)

    yield

    LOGGER.info("Shutting down Whereabouts...")
    await close_db()
    LOGGER.info("Cleanup complete")


APPLICATION: FastAPI = FastAPI(
    title=SETTINGS.app_name,
    description="Whereabouts - Track where residents have been scanned",
    version=SETTINGS.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=OPENAPI_TAGS,
)

APPLICATION.add_middleware(
    CORSMiddleware,
    allow_origins=SETTINGS.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

APPLICATION.include_router(api_router)


@APPLICATION.get("/health", tags=["Health"])
async def health_check() -> t.Dict[str, str]:
    """Health check endpoint for monitoring.

    Returns:
        t.Dict[str, str]: A dictionary indicating the health status.
    """
    return {"status": "healthy"}
