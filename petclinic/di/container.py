# Local application imports
from typing import Optional

from .base_container import BaseContainer
from .providers import (
    DatabaseProvider,
    RepositoryProvider,
    PetProvider,
    OwnerProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connections (DatabaseProvider)
    2. Repositories (RepositoryProvider) - depends on database
    3. Services (PetProvider, OwnerProvider) - depend on repositories
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → services
        """
        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        PetProvider.register(self)
        OwnerProvider.register(self)


# Global container instance (singleton pattern)
_container: Optional[BaseContainer] = None


def get_container() -> BaseContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        Container instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def set_container(container: Optional[BaseContainer]) -> None:
    """Replace the global container; None makes the next get_container() build a fresh one."""
    global _container
    _container = container
