"""Test container builders with selective unmocking."""

from typing import Optional

import httpx
from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from quickblog.config import ClientSettings
from quickblog.util.di import PROVIDERS, ClientProvider, Component, get_provider
from tests.di.client import StubClientConfigProvider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build API test container with selective unmocking.

    Args:
        unmock: Components to use production implementations for.
                All others use mocks if available.

    Returns:
        Configured test container

    Raises:
        ValueError: If unknown components are requested

    Examples:
        # Unit tests - in-memory persistence
        container = build_test_container()

        # Integration tests - real database (DATABASE__URL must point at it)
        container = build_test_container(unmock={"persistence"})
    """
    unmock = unmock or set()
    _validate_unmock(unmock)

    provider_instances = []
    for base in PROVIDERS:
        component_name = getattr(base, "__mock_component__", None)
        if base.__subclasses__() and component_name:
            provider_class = get_provider(base, use_mock=component_name not in unmock)
        else:
            provider_class = get_provider(base, use_mock=False)
        provider_instances.append(provider_class())

    return make_async_container(*provider_instances, FastapiProvider())


def build_client_test_container(
    client_settings: ClientSettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> AsyncContainer:
    """Build client container with fixed settings.

    Args:
        client_settings: Client settings (mode, base_url, storage_path...)
        transport: httpx transport for the remote backend, e.g.
            ``httpx.ASGITransport(app)`` or ``httpx.MockTransport(handler)``

    Returns:
        Configured client container
    """
    return make_async_container(
        ClientProvider(), StubClientConfigProvider(client_settings, transport)
    )


def _validate_unmock(unmock: set[Component]) -> None:
    """Validate unmock configuration.

    Args:
        unmock: Set of components to unmock

    Raises:
        ValueError: If unknown components are requested
    """
    all_components = {
        getattr(p, "__mock_component__")
        for p in PROVIDERS
        if p.__subclasses__() and getattr(p, "__mock_component__", None)
    }

    unknown = unmock - all_components
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")
