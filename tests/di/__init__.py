"""Mock providers for testing."""

from .container import build_test_container
from .mail import MockMailProvider
from .openim import MockOpenIMProvider
from .persistence import MockPersistenceProvider

__all__ = [
    "MockMailProvider",
    "MockOpenIMProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
