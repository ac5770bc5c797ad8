"""Infrastructure providers."""

# Import bases
from .persistence import PersistenceProvider
from .security import SecurityProvider

# Import implementations (needed for __subclasses__())
from .persistence import ProdPersistenceProvider  # noqa: F401
from .security import ProdSecurityProvider  # noqa: F401

__all__ = [
    "PersistenceProvider",
    "ProdPersistenceProvider",
    "ProdSecurityProvider",
    "SecurityProvider",
]
