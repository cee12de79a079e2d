from typing import TYPE_CHECKING
from ...domain.repositories.owner_repository import OwnerRepository
from ...domain.repositories.pet_repository import PetRepository
from ...application.services.pet_service import PetService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PetProvider:
    """Pet service provider - registers pet-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register pet service.
        Service is created with repositories from container.
        """
        container.register_singleton(
            PetService,
            PetService(
                pet_repository=container.get(PetRepository),
                owner_repository=container.get(OwnerRepository),
            )
        )
