"""Infrastructure DI providers."""

from natter.util.di.infrastructure.identity import (
    IdentityProviderProvider,
    ProdIdentityProviderProvider,
)
from natter.util.di.infrastructure.persistence import (
    PersistenceProvider,
    ProdPersistenceProvider,
)

__all__ = [
    "IdentityProviderProvider",
    "PersistenceProvider",
    "ProdIdentityProviderProvider",
    "ProdPersistenceProvider",
]
