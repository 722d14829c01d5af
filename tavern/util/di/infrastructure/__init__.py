"""Infrastructure providers.

Production implementations are imported here so they are registered as
subclasses of their component base before a container is built.
"""

from .email import EmailProvider, ProdEmailProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "EmailProvider",
    "PersistenceProvider",
    "ProdEmailProvider",
    "ProdPersistenceProvider",
]
