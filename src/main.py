"""ASGI entry point for the catalog BFF (``uvicorn src.main:app``)."""

import uvicorn

from src.application import create_app
from src.config import settings

app = create_app()

__all__ = ["app"]


if __name__ == "__main__":
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
