"""Mock providers for testing."""

from .persistence import MockPersistenceProvider
from .security import FakePasswordHasher, MockSecurityProvider
from .container import build_test_container

__all__ = [
    "FakePasswordHasher",
    "MockPersistenceProvider",
    "MockSecurityProvider",
    "build_test_container",
]
