"""
FastAPI application for the Reddit API service.

This module initializes and configures the FastAPI application that serves
the subreddit, post and comment endpoints.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from reddit_api.api.endpoints import comments, posts, subreddits
from reddit_api.config.settings import settings
from reddit_api.core.document_store import DocumentStore
from reddit_api.core.errors import RedditApiError
from reddit_api.models.dtos import HealthResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Builds the store client once for the whole process unless one was
    injected through ``create_app``, and disposes of it on shutdown.
    """
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")

    owns_store = app.state.store is None
    if owns_store:
        app.state.store = DocumentStore(settings.DATABASE_URL, echo=settings.DEBUG)
        await app.state.store.connect(create_schema=settings.AUTO_CREATE_SCHEMA)

    yield

    logger.info("Shutting down application")
    if owns_store:
        await app.state.store.close()
        app.state.store = None


async def handle_api_error(request: Request, exc: RedditApiError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


def create_app(store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        store: Pre-built store client. When omitted one is created from
            settings during application startup.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="CRUD API over subreddits, their posts and the comments on those posts.",
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RedditApiError, handle_api_error)

    app.include_router(subreddits.router, prefix="/subreddits", tags=["subreddits"])
    app.include_router(posts.router, prefix="/subreddits", tags=["posts"])
    app.include_router(comments.router, prefix="/subreddits", tags=["comments"])

    @app.get("/health", tags=["health"], response_model=HealthResponse)
    async def health_check(request: Request) -> HealthResponse:
        """Report service status and whether the database is reachable."""
        current_store = request.app.state.store
        database_ok = current_store is not None and await current_store.ping()
        return HealthResponse(
            status="healthy" if database_ok else "degraded",
            service=settings.APP_NAME,
            version=settings.APP_VERSION,
            timestamp=datetime.now(timezone.utc),
            database="connected" if database_ok else "unavailable",
        )

    return app
