"""Small response schemas shared across routes."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CategoriesResponse(BaseModel):
    categories: list[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Shape of every error body (FastAPI's default ``detail`` envelope)."""

    detail: str
