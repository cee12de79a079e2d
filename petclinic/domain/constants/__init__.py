from .owner_fields import OwnerFields
from .pet_fields import PetFields
from .pet_types import PET_TYPES, get_pet_types

__all__ = ["OwnerFields", "PetFields", "PET_TYPES", "get_pet_types"]
