"""
Pet Validator
=============

Field validation for submitted pets, composed of simple predicate checks.
"""
from petclinic.application.forms.binding_result import BindingResult
from petclinic.domain.constants.pet_fields import PetFields
from petclinic.domain.constants.pet_types import PET_TYPES
from petclinic.domain.models.pet import Pet
from petclinic.utils.datetime_utils import today

REQUIRED = "required"
REQUIRED_MESSAGE = "is required"


def validate_pet(pet: Pet, result: BindingResult) -> BindingResult:
    """
    Validate a bound pet and record field errors on ``result``.

    Checks:
    - name must not be empty
    - a new pet must have a type; any type must be a known pet type
    - birth date is required and must not lie in the future
    """
    if not pet.name or not pet.name.strip():
        result.reject_value(PetFields.NAME, REQUIRED, REQUIRED_MESSAGE)

    if pet.type is None:
        if pet.is_new():
            result.reject_value(PetFields.TYPE, REQUIRED, REQUIRED_MESSAGE)
    elif pet.type not in PET_TYPES:
        result.reject_value(PetFields.TYPE, "invalid", "is not a known pet type")

    if pet.birth_date is None:
        # An unparseable date was already rejected during binding
        if not result.has_field_errors(PetFields.BIRTH_DATE):
            result.reject_value(PetFields.BIRTH_DATE, REQUIRED, REQUIRED_MESSAGE)
    elif pet.birth_date > today():
        result.reject_value(PetFields.BIRTH_DATE, "invalid", "must be in the past")

    return result
