"""Application factory for the Cinestream Catalog API."""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import browse, details, embed, health, home, search
from .settings import CatalogSettings
from .state import AppState


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Close the pooled TMDB client on shutdown."""

    yield
    service = app.state.app_state.catalog_service
    if service is not None:
        await service.fetcher.aclose()


def create_app(settings: CatalogSettings | None = None) -> FastAPI:
    """Build and configure the FastAPI application."""

    resolved_settings = settings or CatalogSettings()
    app_state = AppState(settings=resolved_settings)

    app = FastAPI(title="Cinestream Catalog API", version="0.1.0", lifespan=lifespan)
    app.state.app_state = app_state
    app.state.settings = app_state.settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    for router in (
        health.router,
        browse.router,
        search.router,
        details.router,
        embed.router,
        home.router,
    ):
        app.include_router(router)

    return app
