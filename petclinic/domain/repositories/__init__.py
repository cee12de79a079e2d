from .owner_repository import OwnerRepository
from .pet_repository import PetRepository

__all__ = ["OwnerRepository", "PetRepository"]
