"""Request tracing through aiohttp's access log.

The record is written once the response has been sent, so it carries the
final status (304, 206 and 404 from file responses included) and the full
handling time. Handlers cancelled by a client disconnect produce no record.
"""

import logging
from typing import Any

from aiohttp import web
from aiohttp.abc import AbstractAccessLogger

logger = logging.getLogger("distserve.access")


class TraceAccessLogger(AbstractAccessLogger):
    """Log method, path, status and latency for every request."""

    def log(self, request: web.BaseRequest, response: web.StreamResponse, time: float) -> None:
        latency_ms = time * 1000
        self.logger.info(
            f"{request.method} {request.path} {response.status} {latency_ms:.1f}ms",
            extra={
                "http_method": request.method,
                "http_path": request.path,
                "http_status": response.status,
                "latency_ms": latency_ms,
            },
        )

    @property
    def enabled(self) -> bool:
        return self.logger.isEnabledFor(logging.INFO)


def access_log_kwargs() -> dict[str, Any]:
    """Runner arguments that route the access log through TraceAccessLogger."""
    return {"access_log_class": TraceAccessLogger, "access_log": logger}
