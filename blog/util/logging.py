"""Stdlib logging configuration.

Application code logs through logfire. Libraries that log through the
stdlib (uvicorn, sqlalchemy, alembic) are forwarded to logfire as well, so
one pipeline carries everything.
"""

import logging

import logfire

from blog.config import Settings

# Libraries that are too chatty at INFO
QUIET_LOGGERS = ("sqlalchemy.engine", "asyncpg", "uvicorn.access")


def setup_logging(settings: Settings) -> None:
    """Route stdlib logging into logfire.

    Args:
        settings: Application settings
    """
    level = logging.DEBUG if settings.debug else logging.INFO

    logging.basicConfig(
        level=level,
        handlers=[logfire.LogfireLoggingHandler()],
        force=True,  # Replace handlers installed by imported libraries
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("blog").setLevel(level)

    logfire.info(
        "Logging configured",
        environment=settings.environment,
        level=logging.getLevelName(level),
    )
