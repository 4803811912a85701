"""Middleware for the forwarded-header web app."""

from .headers import RemoteAddrMiddleware
from .logging import LoggingMiddleware

__all__ = ["RemoteAddrMiddleware", "LoggingMiddleware"]
