"""
Owner Model
===========

Domain model representing a clinic customer.
"""
from typing import List
from dataclasses import dataclass, field

from petclinic.domain.models.pet import Pet


@dataclass
class Owner:
    """
    Owner domain model.

    ``pets`` is not persisted with the owner; services fill it from the
    pet repository when a view needs it.
    """
    id: str
    first_name: str = ""
    last_name: str = ""
    address: str = ""
    city: str = ""
    telephone: str = ""
    pets: List[Pet] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
