"""
Providers Package
=================

Dependency injection providers for registering dependencies.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .pet_provider import PetProvider
from .owner_provider import OwnerProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "PetProvider",
    "OwnerProvider",
]
