"""Container assembly and FastAPI wiring."""

from typing import AbstractSet

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from tavern.util.di import Component, select_providers


def create_container(mocked: AbstractSet[Component] = frozenset()) -> AsyncContainer:
    """Build the application container.

    The server runs with every component real. Tests name the components to
    replace with in-process fakes.
    """
    # FastapiProvider exposes the Request to REQUEST-scoped factories
    return make_async_container(*select_providers(mocked), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Resolve ``FromDishka`` route parameters from ``container``."""
    setup_dishka(container, app)
