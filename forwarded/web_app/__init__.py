"""Web application for inspecting forwarded headers."""

from .app_factory import create_app

__all__ = ["create_app"]
