"""Dependency injection container for the blog API."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from blog.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the production container with every real implementation.

    Settings are loaded from environment variables when first resolved.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # FastapiProvider supplies Request to the principal provider
    return make_async_container(*provider_instances, FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    """Attach the container to the app.

    Routes using ``DishkaRoute`` then resolve ``FromDishka[...]`` parameters
    from a request-scoped child of this container.
    """
    setup_dishka(container, app)
