"""FastAPI application factory."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI

from blog.interface.api.routes import auth, comments, health, posts, users
from blog.interface.error import register_error_handlers
from blog.util.di import create_container
from blog.util.observability import instrument_fastapi

ROUTERS = (health.router, auth.router, posts.router, comments.router, users.router)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the DI container (and with it the database pool) on shutdown."""
    yield
    await app.state.dishka_container.close()
    logfire.info("Application shut down")


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create the FastAPI application.

    Logfire should be configured before calling this; scripts/start_app.py
    does so. Passing no container builds the production one, which loads
    settings from the environment and fails fast without AUTH__JWT_SECRET.

    Args:
        container: DI container to serve requests from

    Returns:
        Configured application
    """
    app_instance = FastAPI(
        title="Blog Platform API",
        description="Posts, profiles, threaded comments and moderation",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)
    register_error_handlers(app_instance)
    setup_dishka(container or create_container(), app_instance)

    for router in ROUTERS:
        app_instance.include_router(router)

    return app_instance
