"""Dependency injection container."""

import logfire
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from board.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container.

    Every mockable component resolves to its production implementation;
    settings are read from the environment on first use.

    Returns:
        Container with the board providers and FastAPI request context
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    logfire.info(
        "DI container built", providers=[type(p).__name__ for p in providers]
    )
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Serve each request of ``app`` from a REQUEST scope of ``container``.

    The container is kept on ``app.state.dishka_container``, where the
    application lifespan closes it on shutdown.
    """
    setup_dishka(container=container, app=app)
