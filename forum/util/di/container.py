"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import build_providers


def create_container() -> AsyncContainer:
    """Build the production container.

    Settings are read from the environment by the config provider.
    """
    # FastapiProvider exposes the current Request inside REQUEST scope
    return make_async_container(*build_providers(), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach a container to the app and close it on shutdown.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
