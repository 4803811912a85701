"""Forwarded headers middleware."""

import logging
from typing import Callable, Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from forwarded.lib.common.logging_config import WEB_LOGGER, get_logger
from forwarded.lib.extractors import DEFAULT_EXTRACTOR, Extractor, Field


class RemoteAddrMiddleware(BaseHTTPMiddleware):
    """Middleware that replaces the peer address with the forwarded client.

    The extractor's For value is written into the ASGI scope's ``client``
    before the request reaches any downstream handler. All four extracted
    fields are also stored in ``request.state`` as ``forwarded_by``,
    ``forwarded_for``, ``forwarded_host`` and ``forwarded_proto``, and the
    address of the connecting peer as ``peer``.

    Only put this in front of proxies you trust; it believes whatever the
    headers say.
    """

    def __init__(
        self,
        app,
        extractor: Optional[Extractor] = None,
        overwrite_empty: bool = False,
        logger: logging.Logger = None,
    ):
        """Initialize remote address middleware.

        Args:
            app: ASGI application
            extractor: Extractor to use (defaults to Forwarded, then X-Forwarded-*)
            overwrite_empty: Overwrite the peer address even when no For
                value was found (the client host becomes "")
            logger: Optional logger
        """
        super().__init__(app)
        self.extractor = extractor or DEFAULT_EXTRACTOR
        self.overwrite_empty = overwrite_empty
        self.logger = logger or get_logger(WEB_LOGGER)

    async def dispatch(self, request: Request, call_next: Callable):
        """Rewrite the peer address and record forwarded fields."""
        headers = request.headers
        client = request.scope.get("client")

        request.state.peer = client[0] if client else None
        request.state.forwarded_by = self.extractor.get(Field.BY, headers)
        request.state.forwarded_for = self.extractor.get(Field.FOR, headers)
        request.state.forwarded_host = self.extractor.get(Field.HOST, headers)
        request.state.forwarded_proto = self.extractor.get(Field.PROTO, headers)

        forwarded_for = request.state.forwarded_for
        if forwarded_for or self.overwrite_empty:
            self.logger.debug(
                f"Rewriting peer address {request.state.peer!r} -> {forwarded_for!r}",
                extra={"peer": request.state.peer, "forwarded_for": forwarded_for},
            )
            request.scope["client"] = (forwarded_for, client[1] if client else 0)

        response = await call_next(request)
        return response
