"""
Pet Form Binding
================

Explicit request-parameter parsing for the pet form.
"""
import logging
from typing import Optional, Tuple

from petclinic.application.dto.pet_dto import PetFormData
from petclinic.application.forms.binding_result import BindingResult
from petclinic.domain.constants.pet_fields import PetFields
from petclinic.domain.models.pet import Pet
from petclinic.utils.datetime_utils import parse_date

logger = logging.getLogger(__name__)


def _clean(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def bind_pet_form(form: PetFormData, pet_id: Optional[str] = None) -> Tuple[Pet, BindingResult]:
    """
    Bind submitted form values onto a new Pet instance.

    Only name, type and birth date are taken from the form. The pet ID
    comes from the URL path (edit form only) and the owner is attached by
    the caller.

    Args:
        form: Raw submitted form values
        pet_id: Pet identifier from the URL path

    Returns:
        Tuple of (pet, binding result with any conversion errors)
    """
    result = BindingResult()

    pet = Pet(id=pet_id)
    pet.name = form.name.strip()
    pet.type = _clean(form.type)

    try:
        pet.birth_date = parse_date(_clean(form.birth_date))
    except ValueError:
        logger.debug(f"Unparseable birth date {form.birth_date!r}")
        result.reject_value(PetFields.BIRTH_DATE, "typeMismatch", "invalid date")

    return pet, result
