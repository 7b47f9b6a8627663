#!/usr/bin/env python3
"""Bring the database schema up to date before the app starts."""

import sys
from pathlib import Path

import logfire
from alembic import command
from alembic.config import Config
from sqlalchemy.engine import make_url

from pinbook.config import Settings
from pinbook.util.logging import setup_logging
from pinbook.util.observability import configure_logfire

ALEMBIC_INI = Path(__file__).resolve().parent.parent / "alembic.ini"


def main(revision: str = "head") -> int:
    """Upgrade the schema to ``revision``.

    Failures are logged and re-raised so a deploy stops before serving
    requests against a stale schema.
    """
    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    # Host and database only; the URL may carry a password
    url = make_url(settings.database_url)
    target = f"{url.host}:{url.port or 5432}/{url.database}"

    try:
        with logfire.span("run_migrations", target=target, revision=revision):
            command.upgrade(Config(str(ALEMBIC_INI)), revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            target=target,
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    logfire.info("Database schema is up to date", target=target, revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(*sys.argv[1:2]))
