"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from skillswap.config import Settings, get_settings
from skillswap.dependencies import Stores
from skillswap.gamification.router import router as gamification_router
from skillswap.gratitude.router import router as gratitude_router
from skillswap.health.router import router as health_router
from skillswap.identity.router import router as identity_router
from skillswap.matching.router import router as matching_router
from skillswap.messaging.router import router as messaging_router
from skillswap.middleware import setup_middleware
from skillswap.seed import seed_demo
from skillswap.sessions.router import router as sessions_router
from skillswap.suggestions.router import router as suggestions_router

API_ROUTERS: list[APIRouter] = [
    health_router,
    identity_router,
    matching_router,
    sessions_router,
    messaging_router,
    gratitude_router,
    gamification_router,
    suggestions_router,
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup and shutdown lifecycle."""
    if app.state.settings.seed_demo:
        seed_demo(app.state.stores)
    yield


def create_app(settings: Settings | None = None, stores: Stores | None = None) -> FastAPI:
    """Create and configure the FastAPI application with its own stores."""
    settings = settings or get_settings()

    app = FastAPI(
        title="SkillSwap API",
        description="Reciprocal skill matching, learning sessions, Wall of Thanks and badge leaderboard",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.stores = stores or Stores()

    setup_middleware(app, settings)
    # Routes answer both at the root and under the API prefix.
    for router in API_ROUTERS:
        app.include_router(router)
        if settings.api_prefix:
            app.include_router(router, prefix=settings.api_prefix, include_in_schema=False)

    return app


app = create_app()
