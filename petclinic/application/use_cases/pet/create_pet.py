"""
Create Pet Use Case
===================

Business use case for processing the new pet form.
"""
import logging

from petclinic.application.dto.pet_dto import PetFormData, PetFormResult
from petclinic.application.forms.pet_form import bind_pet_form
from petclinic.application.forms.pet_validator import validate_pet
from petclinic.domain.constants.pet_fields import PetFields
from petclinic.domain.models.owner import Owner
from petclinic.domain.repositories.pet_repository import PetRepository

logger = logging.getLogger(__name__)


class CreatePetUseCase:
    """
    Use case for adding a pet to an owner.

    Pet names are unique per owner, compared case-insensitively.
    """

    def __init__(self, pet_repository: PetRepository):
        """
        Initialize use case with repository.

        Args:
            pet_repository: Repository for pet persistence
        """
        self._repository = pet_repository

    def execute(self, owner: Owner, form: PetFormData) -> PetFormResult:
        """
        Execute the create pet use case.

        Args:
            owner: Owner resolved from the request path
            form: Submitted form values

        Returns:
            PetFormResult with success=True and the saved pet, or with the
            field errors and the submitted values when the form is rejected
        """
        pet, errors = bind_pet_form(form)
        validate_pet(pet, errors)

        if pet.name and pet.is_new() and not self.is_pet_name_unique(owner.id, pet.name):
            errors.reject_value(PetFields.NAME, "duplicate", "already exists")

        pet.assign_owner(owner.id)

        if errors.has_errors():
            logger.debug(
                f"Rejected new pet for owner {owner.id}: "
                f"{[(e.field, e.code) for e in errors.errors]}"
            )
            return PetFormResult(owner=owner, pet=pet, form=form, errors=errors)

        saved = self._repository.save(pet)
        logger.info(f"Pet {saved.id} ({saved.name}) added to owner {owner.id}")
        return PetFormResult(owner=owner, pet=saved, form=form, errors=errors, success=True)

    def is_pet_name_unique(self, owner_id: str, pet_name: str) -> bool:
        """Check that none of the owner's pets already has this name (case-insensitive)."""
        for existing in self._repository.find_by_owner_id(owner_id):
            if existing.has_name(pet_name):
                return False
        return True
