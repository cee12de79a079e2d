"""
Pet Model
=========

Domain model representing an animal registered with the clinic.
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import date, datetime
from typing import Optional
from dataclasses import dataclass, field

from petclinic.utils.datetime_utils import now


@dataclass
class Pet:
    """
    Pet domain model.

    A pet belongs to exactly one owner. ``id`` stays None until the pet
    has been persisted, which is how a new pet is told apart from an
    existing one.
    """
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None  # one of PET_TYPES
    birth_date: Optional[date] = None
    owner_id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_new(self) -> bool:
        """Check if the pet has not been persisted yet."""
        return self.id is None

    def has_name(self, other_name: str) -> bool:
        """Case-insensitive name comparison."""
        if self.name is None or other_name is None:
            return False
        return self.name.casefold() == other_name.casefold()

    def assign_owner(self, owner_id: str) -> None:
        """Attach the pet to an owner."""
        self.owner_id = owner_id
