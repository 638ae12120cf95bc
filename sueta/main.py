"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import Optional

import structlog
from fastapi import FastAPI
from pymongo import MongoClient

from sueta import __version__
from sueta.config import Settings, get_settings
from sueta.core.exceptions import JSONResponse, setup_exception_handlers
from sueta.core.middleware import setup_middleware
from sueta.infrastructure.mongo import create_client, get_database
from sueta.infrastructure.repositories.post_repository import MongoPostRepository
from sueta.infrastructure.repositories.user_repository import MongoUserRepository
from sueta.interfaces.api.posts import router as posts_router
from sueta.interfaces.api.users import router as users_router

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: open storage on startup, close it on shutdown."""
    settings: Settings = app.state.settings
    logger.info("Starting Sueta services...", env=settings.ENVIRONMENT)

    client = app.state.mongo_client or create_client(settings)
    database = get_database(client, settings)

    user_repository = MongoUserRepository(database[settings.MONGO_COLLECTION])
    user_repository.ensure_indexes()
    app.state.user_repository = user_repository
    app.state.post_repository = MongoPostRepository(database[settings.MONGO_POSTS_COLLECTION])
    logger.info("Connected to database", database=settings.MONGO_DATABASE)

    yield

    client.close()
    logger.info("Closed mongo database connection")


def create_app(settings: Optional[Settings] = None, mongo_client: Optional[MongoClient] = None) -> FastAPI:
    """Build the application.

    ``mongo_client`` lets callers supply an already configured client;
    otherwise one is created from ``settings`` at startup.
    """
    app = FastAPI(
        title="Sueta User Service API",
        description="Account and post management over MongoDB",
        version=__version__,
        lifespan=lifespan,
        default_response_class=JSONResponse,
    )
    app.state.settings = settings or get_settings()
    app.state.mongo_client = mongo_client

    setup_middleware(app)
    setup_exception_handlers(app)

    app.include_router(users_router)
    app.include_router(posts_router)

    @app.get("/health")
    def health():
        return {"status": "healthy"}

    return app
