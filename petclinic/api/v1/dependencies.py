"""
Dependency Container
====================

FastAPI dependencies backed by the DI container.
"""
from fastapi import Depends

from petclinic.application.services.owner_service import OwnerService
from petclinic.application.services.pet_service import PetService
from petclinic.domain.models.owner import Owner
from petclinic.di.container import get_container


def get_pet_service() -> PetService:
    """
    Get pet service instance (singleton).

    Returns:
        PetService instance
    """
    container = get_container()
    return container.get(PetService)


def get_owner_service() -> OwnerService:
    """
    Get owner service instance (singleton).

    Returns:
        OwnerService instance
    """
    container = get_container()
    return container.get(OwnerService)


def get_owner(owner_id: str, service: PetService = Depends(get_pet_service)) -> Owner:
    """
    Resolve the owner named in the request path.

    OwnerNotFoundError propagates to the application's exception handler.
    """
    return service.find_owner(owner_id)
