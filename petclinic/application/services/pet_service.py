"""
Pet Service
===========

Application service that coordinates the pet form operations.
This service orchestrates the create and update use cases.
"""
from typing import List

from petclinic.application.dto.pet_dto import PetFormData, PetFormResult
from petclinic.application.use_cases.pet.create_pet import CreatePetUseCase
from petclinic.application.use_cases.pet.update_pet import UpdatePetUseCase
from petclinic.domain.constants.pet_types import get_pet_types
from petclinic.domain.exceptions import OwnerNotFoundError, PetNotFoundError
from petclinic.domain.models.owner import Owner
from petclinic.domain.models.pet import Pet
from petclinic.domain.repositories.owner_repository import OwnerRepository
from petclinic.domain.repositories.pet_repository import PetRepository


class PetService:
    """
    Application service for pet operations.

    Lookup failures raise EntityNotFoundError subclasses; they are left for
    the web layer's exception handler.
    """

    def __init__(self, pet_repository: PetRepository, owner_repository: OwnerRepository):
        """
        Initialize service with repositories.

        Args:
            pet_repository: Repository for pet persistence
            owner_repository: Repository for owner lookup
        """
        self._pets = pet_repository
        self._owners = owner_repository
        self._create_use_case = CreatePetUseCase(pet_repository)
        self._update_use_case = UpdatePetUseCase(pet_repository)

    def get_pet_types(self) -> List[str]:
        """Pet types for the selection control, in display order."""
        return get_pet_types()

    def find_owner(self, owner_id: str) -> Owner:
        """
        Resolve an owner from the request path.

        Raises:
            OwnerNotFoundError: If no owner has this ID
        """
        owner = self._owners.find_by_id(owner_id)
        if owner is None:
            raise OwnerNotFoundError(owner_id)
        return owner

    def find_pet(self, owner: Owner, pet_id: str) -> Pet:
        """
        Look up one of the owner's pets.

        Raises:
            PetNotFoundError: If no pet has this ID or it belongs to another owner
        """
        pet = self._pets.find_by_id(pet_id)
        if pet is None or pet.owner_id != owner.id:
            raise PetNotFoundError(pet_id)
        return pet

    def init_creation_form(self, owner: Owner) -> PetFormResult:
        """Prepare the form for a new, unsaved pet of this owner."""
        pet = Pet(owner_id=owner.id)
        return PetFormResult(owner=owner, pet=pet, form=PetFormData.from_pet(pet))

    def process_creation_form(self, owner: Owner, form: PetFormData) -> PetFormResult:
        return self._create_use_case.execute(owner, form)

    def init_update_form(self, owner: Owner, pet_id: str) -> PetFormResult:
        """Prepare the edit form pre-populated with the stored pet."""
        pet = self.find_pet(owner, pet_id)
        return PetFormResult(owner=owner, pet=pet, form=PetFormData.from_pet(pet))

    def process_update_form(self, owner: Owner, pet_id: str, form: PetFormData) -> PetFormResult:
        return self._update_use_case.execute(owner, pet_id, form)
