"""Request context creation and error translation shared by the routes."""

from __future__ import annotations

import uuid

from fastapi import HTTPException, Request, status

from src.services.clients.catalog_client import CatalogUnavailableError
from src.services.request_context import RequestContext

REQUEST_ID_HEADER = "X-Request-ID"


def assign_request_id(request: Request) -> str:
    """Give the request its correlation id; the middleware echoes it back."""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id
    return request_id


def start_context(request: Request, route: str) -> RequestContext:
    """Build the request context around the id assigned by the middleware."""
    request_id = getattr(request.state, "request_id", None) or assign_request_id(request)
    return RequestContext(route=route, request_id=request_id)


def client_error(status_code: int, detail: str) -> HTTPException:
    return HTTPException(status_code=status_code, detail=detail)


def upstream_failure(
    context: RequestContext,
    message: str,
    error: CatalogUnavailableError,
    **extra,
) -> HTTPException:
    """Log the upstream failure in full and return a generic 502 for the caller."""
    context.logger(__name__).error(
        message,
        exc_info=error,
        extra={
            "upstream_status": error.status,
            "duration_ms": context.elapsed_ms(),
            **extra,
        },
    )
    return client_error(status.HTTP_502_BAD_GATEWAY, message)
