#!/usr/bin/env python3
"""
Main entry point for the forwarded-header inspection service.

Concurrency: every request is handled independently; extraction is pure and
uncached. Set WORKERS > 1 for multi-process scaling. Each worker process
builds its own app from the environment via ``build_app``.

Usage:
    forwarded-server
    python -m forwarded.app

Environment variables:
    HOST - Host to bind to
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    STRATEGIES - Extraction order, e.g. "standard,legacy"
    LOWERCASE_VALUES - Lower-case values read from Forwarded (default true)
    OVERWRITE_EMPTY_CLIENT - Overwrite the peer address even with no For value
    LOG_LEVEL - Logging level
    LOG_DROPPED_SEGMENTS - Log dropped Forwarded segments
"""

import sys

import uvicorn
from fastapi import FastAPI

from forwarded.config import Config, load_config
from forwarded.lib.common.logging_config import setup_logging
from forwarded.web_app import create_app


APP_FACTORY = "forwarded.app:build_app"


def configure_logging(config: Config):
    return setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
        log_dropped_segments=config.log_dropped_segments,
    )


def build_app() -> FastAPI:
    """App factory used by uvicorn (called once per worker process)."""
    config = load_config()
    logger = configure_logging(config)
    app = create_app(config=config, logger=logger)
    logger.info(f"Extractor: {app.state.extractor!r}")
    return app


def main():
    """Main entry point."""
    config = load_config()
    logger = configure_logging(config)

    logger.info("Forwarded Headers Service")
    logger.info(f"Configuration: {config.model_dump()}")

    # uvicorn installs its own SIGINT/SIGTERM handlers for graceful shutdown
    try:
        logger.info(f"Starting server on {config.host}:{config.port} with {config.workers} worker(s)")
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=True,
        )
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
