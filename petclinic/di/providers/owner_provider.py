from typing import TYPE_CHECKING
from ...domain.repositories.owner_repository import OwnerRepository
from ...domain.repositories.pet_repository import PetRepository
from ...application.services.owner_service import OwnerService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class OwnerProvider:
    """Owner service provider - registers owner-related services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            OwnerService,
            OwnerService(
                owner_repository=container.get(OwnerRepository),
                pet_repository=container.get(PetRepository),
            )
        )
