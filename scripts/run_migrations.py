#!/usr/bin/env python3
"""Apply database migrations, reporting failures to Logfire."""

import sys

import logfire
from alembic import command
from alembic.config import Config

from blog.config import Settings
from blog.util.logging import get_logger, setup_logging
from blog.util.observability import configure_logfire

logger = get_logger(__name__)


def main() -> int:
    """Upgrade the schema to the latest revision."""
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    try:
        with logfire.span("migrations.upgrade", revision="head"):
            command.upgrade(Config("alembic.ini"), "head")
        logger.info("Database migrations completed")
        return 0

    except Exception as e:
        logfire.error(
            "Database migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        # Fail the deploy instead of serving on a broken schema
        raise


if __name__ == "__main__":
    sys.exit(main())
