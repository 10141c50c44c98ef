"""System-level routes such as health checks."""

from __future__ import annotations

from fastapi import APIRouter

from src.config import settings
from src.services.clients.catalog_client import CatalogDependency, CatalogUnavailableError

router = APIRouter(tags=["system"])


@router.get("/")
async def read_root() -> dict[str, str]:
    """Hello World endpoint used by smoke tests."""

    return {"message": "Hello World"}


@router.get("/health")
async def health_check(catalog: CatalogDependency) -> dict[str, str]:
    """Health check endpoint with upstream catalog connectivity check."""

    try:
        await catalog.fetch_products(limit=1)
        catalog_status = "connected"
    except CatalogUnavailableError:
        catalog_status = "disconnected"

    return {
        "status": "healthy",
        "catalog": catalog_status,
        "environment": settings.ENVIRONMENT,
    }
