"""Logging configuration for the application."""

import logging
import sys

from pinbook.config import Settings


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging for uvicorn, alembic and library output.

    Application events go through Logfire; this keeps everything else on
    stdout at a level that follows the environment.

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
        stream=sys.stdout,
        force=True,  # Override any existing configuration
    )

    # Per-request client logs are noise; failures surface as FetchFailed
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
    # Migration progress stays visible in production
    logging.getLogger("alembic").setLevel(min(level, logging.INFO))

    logging.getLogger("pinbook").setLevel(level)

    logging.getLogger(__name__).info(
        "Logging configured: environment=%s, level=%s",
        settings.environment,
        logging.getLevelName(level),
    )
