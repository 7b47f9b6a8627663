"""Mock providers for testing."""

from .fetcher import MockFetcherProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockFetcherProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
