"""Production container assembly and FastAPI wiring."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from pinbook.config import Settings
from pinbook.util.di import PROVIDERS, get_provider


def create_container(settings: Settings) -> AsyncContainer:
    """Build the container with every component's production implementation.

    Args:
        settings: Settings shared by the app and all providers

    Returns:
        Configured DI container
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(
        *provider_instances, FastapiProvider(), context={Settings: settings}
    )


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach ``container`` to ``app`` so routes can use ``FromDishka``.

    The container is closed by the app's lifespan, which disposes the
    database engine.
    """
    setup_dishka(container, app)
