"""Request logging middleware."""

import logging
import time
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from forwarded.lib.common.logging_config import WEB_LOGGER, get_logger


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request with both the connecting peer and the forwarded client.

    Must sit inside RemoteAddrMiddleware, whose ``request.state`` values it
    reads. Without them only the peer address is logged.
    """

    def __init__(self, app, logger: logging.Logger = None):
        super().__init__(app)
        self.logger = logger or get_logger(WEB_LOGGER)

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()

        state = request.state
        client = request.client.host if request.client else None
        peer = getattr(state, "peer", client)
        extra = {
            "peer": peer,
            "client": client,
            "forwarded_by": getattr(state, "forwarded_by", ""),
            "forwarded_for": getattr(state, "forwarded_for", ""),
            "forwarded_host": getattr(state, "forwarded_host", ""),
            "forwarded_proto": getattr(state, "forwarded_proto", ""),
        }

        if client != peer:
            origin = f"{client or 'unknown'} via {peer or 'unknown'}"
        else:
            origin = peer or "unknown"
        self.logger.info(
            f"Request: {request.method} {request.url.path} from {origin} "
            f"(host={extra['forwarded_host'] or '-'} proto={extra['forwarded_proto'] or '-'})",
            extra=extra,
        )

        response = await call_next(request)

        duration_ms = (time.time() - start_time) * 1000
        self.logger.info(
            f"Response: {request.method} {request.url.path} - "
            f"Status: {response.status_code} - Duration: {duration_ms:.2f}ms",
            extra={"peer": peer, "client": client},
        )

        return response
