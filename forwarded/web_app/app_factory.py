"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI

from forwarded.config import Config
from forwarded.lib.extractors import Extractor
from .api import api_router
from .middleware.headers import RemoteAddrMiddleware
from .middleware.logging import LoggingMiddleware


def create_app(
    config: Optional[Config] = None,
    extractor: Optional[Extractor] = None,
    logger=None,
) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config: Configuration instance (defaults to Config())
        extractor: Extractor override (defaults to the one built from config)
        logger: Optional service logger; middleware logs to its "web" child

    Returns:
        Configured FastAPI app
    """
    config = config or Config()
    extractor = extractor or config.build_extractor()

    app = FastAPI(
        title="Forwarded Headers",
        description="Inspect client-origin metadata from Forwarded and X-Forwarded-* headers",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.config = config
    app.state.extractor = extractor

    web_logger = logger.getChild("web") if logger else None

    # Last added runs first: the peer address is rewritten before logging sees it
    app.add_middleware(LoggingMiddleware, logger=web_logger)
    app.add_middleware(
        RemoteAddrMiddleware,
        extractor=extractor,
        overwrite_empty=config.overwrite_empty_client,
        logger=web_logger,
    )

    app.include_router(api_router, prefix="/api", tags=["API"])

    return app
