"""Container assembly for the forum API."""

from typing import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from forum.util.di import PROVIDERS, Component, get_provider


def create_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Build the forum container.

    Args:
        mocked: Components served by their fake implementations instead of
            production ones. The module defining a fake must be imported
            before this is called.

    Returns:
        Container whose REQUEST scope matches one HTTP request
    """
    providers = []
    for base in PROVIDERS:
        component = base.__mock_component__
        use_mock = component is not None and component in mocked
        providers.append(get_provider(base, use_mock=use_mock)())
    return make_async_container(*providers, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container so routes can resolve FromDishka[...] params."""
    setup_dishka(container, app)
