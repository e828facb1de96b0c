"""Dependency injection container."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from realty.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are loaded from environment variables by the config provider.

    Returns:
        Container with every production provider plus FastAPI request context
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())


@asynccontextmanager
async def container_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Close the app container on shutdown, disposing the database engine."""
    yield
    container: AsyncContainer | None = getattr(app.state, "dishka_container", None)
    if container is not None:
        logfire.info("Closing DI container")
        await container.close()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the application.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
