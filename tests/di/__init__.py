"""Mock providers for testing."""

from .github import MockIdentityProviderProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProviderProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
