"""Observability configuration using Logfire.

Services and repositories call ``logfire`` directly:

    import logfire

    with logfire.span("vote_service.apply_vote", post_id=str(post_id)):
        ...
        logfire.info("Vote applied", post_id=str(post_id), delta=vote.delta)

This module only configures the SDK and instruments the libraries we use.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from pinbook.config import Settings


def should_send_to_logfire(settings: Settings) -> bool:
    """Decide whether events leave the process.

    An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins; otherwise events are
    sent only when a token is configured.
    """
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the running environment.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send_to_logfire(settings)

    logfire.configure(
        service_name="pinbook-backend",
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace incoming requests.

    Health probes and static thumbnail downloads are left out; they would
    drown the traces that matter.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(app, excluded_urls="/health,/uploads/.*")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through ``engine``.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound image downloads."""
    logfire.instrument_httpx()
