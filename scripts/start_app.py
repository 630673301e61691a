#!/usr/bin/env python3
"""Serve the forum API with uvicorn."""

import sys

import logfire
import uvicorn

from forum.config import Settings
from forum.interface.api.app import create_app
from forum.util.logging import setup_logging
from forum.util.observability import configure_logfire


def main() -> int:
    """Configure logging and Logfire, then serve until shutdown."""
    settings = Settings()
    setup_logging(settings)
    # Before create_app so instrumentation and startup errors are captured
    configure_logfire(settings)

    try:
        app = create_app()
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Serving forum API", host=settings.host, port=settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
        log_config=None,  # Keep the handlers installed by setup_logging
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
