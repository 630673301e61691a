"""Process logging setup.

Standard library log records (uvicorn, alembic, SQLAlchemy) go to stdout
and are also forwarded to Logfire, next to the spans emitted by services.
"""

import logging
import sys

import logfire

from forum.config import Settings

# Third-party loggers kept at WARNING unless debugging
_NOISY_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def log_level(settings: Settings) -> int:
    """Root log level for the configured environment."""
    if settings.debug:
        return logging.DEBUG
    if settings.environment == "production":
        return logging.WARNING
    return logging.INFO


def setup_logging(settings: Settings) -> None:
    """Configure process-wide logging.

    Args:
        settings: Application settings
    """
    level = log_level(settings)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout), logfire.LogfireLoggingHandler()],
        force=True,
    )

    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
