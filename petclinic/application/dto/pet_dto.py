"""
Pet DTO
=======

Pydantic model for the submitted pet form and the dataclass passed from the
use cases to the views.
"""
from dataclasses import dataclass, field
from typing import Any, Mapping

from pydantic import BaseModel, Field

from petclinic.application.forms.binding_result import BindingResult
from petclinic.domain.models.owner import Owner
from petclinic.domain.models.pet import Pet
from petclinic.utils.datetime_utils import to_iso_date


class PetFormData(BaseModel):
    """Raw string values of the pet form, exactly as submitted."""
    name: str = Field("", description="Pet name")
    type: str = Field("", description="Pet type, one of the clinic's pet types")
    birth_date: str = Field("", description="Birth date as YYYY-MM-DD")

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "PetFormData":
        """Build from form-encoded request parameters; unknown and non-text values are ignored."""
        values = {}
        for name in cls.model_fields:
            value = form.get(name)
            if isinstance(value, str):
                values[name] = value
        return cls(**values)

    @classmethod
    def from_pet(cls, pet: Pet) -> "PetFormData":
        return cls(
            name=pet.name or "",
            type=pet.type or "",
            birth_date=to_iso_date(pet.birth_date) or "",
        )


@dataclass
class PetFormResult:
    """
    Outcome of preparing or processing the pet form.

    ``success`` is only True for a submission that was persisted.
    """
    owner: Owner
    pet: Pet
    form: PetFormData
    errors: BindingResult = field(default_factory=BindingResult)
    success: bool = False

    @property
    def is_new(self) -> bool:
        return self.pet.is_new()
