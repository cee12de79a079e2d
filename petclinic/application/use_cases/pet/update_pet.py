"""
Update Pet Use Case
===================

Business use case for processing the edit pet form.
"""
import logging

from petclinic.application.dto.pet_dto import PetFormData, PetFormResult
from petclinic.application.forms.pet_form import bind_pet_form
from petclinic.application.forms.pet_validator import validate_pet
from petclinic.domain.exceptions import PetNotFoundError
from petclinic.domain.models.owner import Owner
from petclinic.domain.repositories.pet_repository import PetRepository

logger = logging.getLogger(__name__)


class UpdatePetUseCase:
    """
    Use case for editing an owner's pet.

    The pet ID comes from the request path and must name one of the
    owner's stored pets. No name uniqueness check is made here: the pet
    keeps its identity even when its name is unchanged.
    """

    def __init__(self, pet_repository: PetRepository):
        self._repository = pet_repository

    def execute(self, owner: Owner, pet_id: str, form: PetFormData) -> PetFormResult:
        """
        Execute the update pet use case.

        Args:
            owner: Owner resolved from the request path
            pet_id: Identifier of the pet being edited
            form: Submitted form values

        Returns:
            PetFormResult, successful when the pet was saved

        Raises:
            PetNotFoundError: If the pet does not exist or belongs to another owner
        """
        stored = self._repository.find_by_id(pet_id)
        if stored is None or stored.owner_id != owner.id:
            raise PetNotFoundError(pet_id)

        pet, errors = bind_pet_form(form, pet_id=pet_id)
        pet.created_at = stored.created_at
        validate_pet(pet, errors)

        if errors.has_errors():
            logger.debug(f"Rejected update of pet {pet_id} for owner {owner.id}")
            return PetFormResult(owner=owner, pet=pet, form=form, errors=errors)

        pet.assign_owner(owner.id)
        saved = self._repository.save(pet)
        logger.info(f"Pet {saved.id} ({saved.name}) updated for owner {owner.id}")
        return PetFormResult(owner=owner, pet=saved, form=form, errors=errors, success=True)
