"""Mock providers for testing."""

from .client import StubClientConfigProvider
from .container import build_client_test_container, build_test_container
from .persistence import MockPersistenceProvider

__all__ = [
    "MockPersistenceProvider",
    "StubClientConfigProvider",
    "build_client_test_container",
    "build_test_container",
]
