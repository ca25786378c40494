#!/usr/bin/env python3
"""Start the API server."""

import sys

import logfire
import uvicorn

from blog.config import load_settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    """Configure observability and serve the app with uvicorn.

    Fails before binding the port if required configuration such as
    AUTH__JWT_SECRET is missing.
    """
    settings = load_settings()

    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info("Starting API server", host=settings.host, port=settings.port)
        uvicorn.run(
            "blog.interface.api.app:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            log_config=None,  # Keep the logfire handler from setup_logging
            log_level="debug" if settings.debug else "info",
        )
        return 0
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise


if __name__ == "__main__":
    sys.exit(main())
