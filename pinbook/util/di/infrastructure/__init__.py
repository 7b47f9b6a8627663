"""Infrastructure providers."""

# Import bases
from .fetcher import FetcherProvider
from .persistence import PersistenceProvider
from .storage import StorageProvider

# Import implementations (needed for __subclasses__())
from .fetcher import ProdFetcherProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401
from .storage import ProdStorageProvider  # noqa: F401

__all__ = [
    "FetcherProvider",
    "PersistenceProvider",
    "ProdFetcherProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
    "StorageProvider",
]
