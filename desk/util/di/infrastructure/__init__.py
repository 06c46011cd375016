"""Infrastructure providers."""

# Import bases
from .mail import MailProvider
from .openim import OpenIMProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .mail import ProdMailProvider  # noqa: F401
from .openim import ProdOpenIMProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "MailProvider",
    "OpenIMProvider",
    "PersistenceProvider",
    "ProdMailProvider",
    "ProdOpenIMProvider",
    "ProdPersistenceProvider",
]
