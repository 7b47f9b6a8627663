"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from pinbook.config import Settings
from pinbook.interface.api.routes import health, posts, users, votes
from pinbook.util.di.container import create_container, setup_di
from pinbook.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    await app.state.dishka_container.close()


def create_app(
    settings: Settings | None = None, container: AsyncContainer | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        settings: Settings to use (loaded from the environment if None)
        container: DI container (the production container if None)
    """
    settings = settings or Settings()

    # Instrument httpx for outbound image downloads
    instrument_httpx()

    app_instance = FastAPI(
        title="Pinbook API",
        description="Share image links, browse the feed and vote on posts",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,  # auth_token cookie
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin", "X-Requested-With"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container(settings))

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(users.router)

    # Thumbnails written by the ingestion pipeline
    app_instance.mount(
        "/uploads",
        StaticFiles(directory=settings.uploads.directory, check_dir=False),
        name="uploads",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
