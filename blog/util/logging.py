"""Logging configuration for the application.

Application code logs through Logfire directly; this module wires the
standard library loggers used by uvicorn, SQLAlchemy and alembic into the
same pipeline so their records end up next to our spans.
"""

import logging
import sys

import logfire

from blog.config import Settings

# Third-party loggers that are too chatty below WARNING
_NOISY_LOGGERS = ("sqlalchemy.engine", "httpx", "httpcore", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging.

    Records go to stdout and are forwarded to Logfire. Level is DEBUG when
    ``settings.debug`` is set, WARNING in production and INFO otherwise.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),
            logfire.LogfireLoggingHandler(),
        ],
        force=True,  # Override any existing configuration
    )

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("blog").setLevel(level)

    get_logger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
