"""Dependency injection containers."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka

from quickblog.util.di import CLIENT_PROVIDERS, PROVIDERS, get_provider
from quickblog.util.observability import instrument_httpx


def create_container() -> AsyncContainer:
    """Build production API container (all prod implementations).

    Settings are loaded from environment variables automatically.

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    # Include FastapiProvider for proper integration with FastAPI
    return make_async_container(*provider_instances, FastapiProvider())


def create_client_container() -> AsyncContainer:
    """Build the client container.

    Resolve ``ClientPostRepository`` or ``PostBrowser`` from it; the
    backend is chosen on first resolution.

    Note: Logfire should be configured before calling this function.

    Returns:
        Configured DI container with client providers
    """
    instrument_httpx()
    return make_async_container(*(base() for base in CLIENT_PROVIDERS))


def setup_di(app, container: AsyncContainer) -> None:
    """Setup dependency injection for FastAPI.

    Args:
        app: FastAPI application
        container: DI container
    """
    setup_dishka(container, app)
