"""
Owner Service
=============

Application service for owner lookups.
"""
from petclinic.domain.exceptions import OwnerNotFoundError
from petclinic.domain.models.owner import Owner
from petclinic.domain.repositories.owner_repository import OwnerRepository
from petclinic.domain.repositories.pet_repository import PetRepository


class OwnerService:
    """Application service for owner operations."""

    def __init__(self, owner_repository: OwnerRepository, pet_repository: PetRepository):
        self._owners = owner_repository
        self._pets = pet_repository

    def get_owner_details(self, owner_id: str) -> Owner:
        """
        Get an owner together with their pets, sorted by name.

        Raises:
            OwnerNotFoundError: If no owner has this ID
        """
        owner = self._owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFoundError(owner_id)
        owner.pets = sorted(
            self._pets.find_by_owner_id(owner.id),
            key=lambda pet: (pet.name or "").casefold(),
        )
        return owner
