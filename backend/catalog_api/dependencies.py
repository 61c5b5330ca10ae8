"""FastAPI dependencies for the Catalog API."""
from fastapi import Depends, HTTPException, Request

from .services import CatalogService
from .settings import CatalogSettings
from .state import AppState


def get_app_state(request: Request) -> AppState:
    """Resolve the shared application state from the FastAPI request."""
    return request.app.state.app_state


def get_settings(app_state: AppState = Depends(get_app_state)) -> CatalogSettings:
    return app_state.settings


def get_catalog_service(app_state: AppState = Depends(get_app_state)) -> CatalogService:
    """Return the catalog service, failing when no TMDB key is configured."""

    if app_state.catalog_service is None:
        raise HTTPException(status_code=500, detail="TMDB API key not configured")
    return app_state.catalog_service
