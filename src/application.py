"""FastAPI application factory and bootstrap helpers."""

from __future__ import annotations

import logging
from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from src.api.errors import REQUEST_ID_HEADER, assign_request_id
from src.api.routes import include_api_routes
from src.config import settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events."""
    logger.info(
        "Proxying product catalog",
        extra={
            "catalog_base_url": settings.CATALOG_BASE_URL,
            "environment": settings.ENVIRONMENT,
        },
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI(
        title="Product Catalog BFF",
        description="Backend-for-frontend over an upstream product catalog",
        version="1.0.0",
        lifespan=lifespan,
    )

    _configure_request_ids(app)
    _configure_cors(app)
    include_api_routes(app)

    return app


def _configure_request_ids(app: FastAPI) -> None:
    """Tag every request with an id and echo it on every response, errors included."""

    @app.middleware("http")
    async def attach_request_id(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        request_id = assign_request_id(request)
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response


def _configure_cors(app: FastAPI) -> None:
    """Allow the configured frontend origin to call the API."""

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.allowed_origin],
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
        allow_credentials=True,
        expose_headers=[REQUEST_ID_HEADER],
    )
