"""Request-scoped correlation and timing context."""

from __future__ import annotations

import logging
import time
import uuid
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any


class _ContextAdapter(logging.LoggerAdapter):
    """Merge the request context into each record's ``extra`` mapping."""

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        kwargs["extra"] = {**self.extra, **kwargs.get("extra", {})}
        return msg, kwargs


@dataclass
class RequestContext:
    """Value threaded from the route handler down through the repository."""

    route: str
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    started_at: float = field(default_factory=time.perf_counter)

    def logger(self, name: str) -> logging.LoggerAdapter:
        return _ContextAdapter(
            logging.getLogger(name),
            {"request_id": self.request_id, "route": self.route},
        )

    def elapsed_ms(self) -> int:
        return int((time.perf_counter() - self.started_at) * 1000)
