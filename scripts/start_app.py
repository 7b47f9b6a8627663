#!/usr/bin/env python3
"""Start the FastAPI application with Logfire error tracking for startup errors."""

import sys

import logfire
import uvicorn

from pinbook.config import Settings
from pinbook.util.error import ConfigurationError
from pinbook.util.logging import setup_logging
from pinbook.util.observability import configure_logfire

DEFAULT_JWT_SECRET = "CHANGE_ME_IN_PRODUCTION"


def check_settings(settings: Settings) -> None:
    """Refuse to serve production traffic with development defaults.

    Raises:
        ConfigurationError: If the token secret was never set
    """
    if (
        settings.environment == "production"
        and settings.auth.jwt_secret == DEFAULT_JWT_SECRET
    ):
        raise ConfigurationError("AUTH__JWT_SECRET must be set in production")


def main() -> int:
    """Start the application and log any startup errors to Logfire."""
    settings = Settings()

    # Configure Logfire early to catch startup errors
    setup_logging(settings)
    configure_logfire(settings)

    try:
        check_settings(settings)

        logfire.info(
            "Starting FastAPI application",
            host=settings.host,
            port=settings.port,
            uploads=str(settings.uploads.directory),
            git_sha=settings.git_sha,
        )

        uvicorn.run(
            "pinbook.interface.api.app:app",
            host=settings.host,
            port=settings.port,
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
        # Re-raise so the container fails properly
        raise


if __name__ == "__main__":
    sys.exit(main())
