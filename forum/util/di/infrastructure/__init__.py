"""Infrastructure components."""

# ProdPersistenceProvider must be imported to register as a subclass
from forum.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
