#!/usr/bin/env python3
"""Start the comments API, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from blog.config import Settings
from blog.util.logging import setup_logging
from blog.util.observability import configure_logfire


def main() -> int:
    """Configure telemetry and logging, then serve the app with uvicorn."""
    settings = Settings()

    # Before the app import, so startup errors are captured too
    configure_logfire(settings)
    setup_logging(settings)

    try:
        logfire.info(
            "Starting blog comments API",
            host=settings.host,
            port=settings.port,
            git_sha=settings.git_sha,
        )
        uvicorn.run(
            "blog.interface.api.app:app",
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
            log_config=None,  # Keep the handlers installed by setup_logging
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
