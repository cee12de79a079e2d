import logging
from typing import TYPE_CHECKING

from ...core.config import get_settings
from ...domain.repositories.owner_repository import OwnerRepository
from ...domain.repositories.pet_repository import PetRepository
from ...infrastructure.db.memory_repositories import InMemoryOwnerRepository, InMemoryPetRepository
from ...infrastructure.db.mongo_owner_repository import MongoOwnerRepository
from ...infrastructure.db.mongo_pet_repository import MongoPetRepository
from ...infrastructure.db.sample_data import seed_sample_data

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register repository implementations for the configured backend.

        Raises:
            ValueError: If REPOSITORY_BACKEND names an unknown backend
        """
        settings = get_settings()
        backend = settings.repository_backend

        if backend == "mongo":
            mongo_client = container.get("mongo_client")
            owner_repository = MongoOwnerRepository(
                mongo_client.get_collection(settings.owners_collection)
            )
            pet_repository = MongoPetRepository(
                mongo_client.get_collection(settings.pets_collection)
            )
        elif backend == "memory":
            owner_repository = InMemoryOwnerRepository()
            pet_repository = InMemoryPetRepository()
            if settings.seed_sample_data:
                seed_sample_data(owner_repository, pet_repository)
        else:
            raise ValueError(f"Unknown repository backend '{backend}'")

        logger.info(f"Using '{backend}' repositories")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(OwnerRepository, owner_repository)
        container.register_singleton(PetRepository, pet_repository)
