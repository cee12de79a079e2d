"""
Pet Repository Interface
========================

Abstract interface for pet data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from petclinic.domain.models.pet import Pet


class PetRepository(ABC):
    """
    Abstract repository for pet persistence operations.

    This interface defines the contract for pet data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def find_by_id(self, pet_id: str) -> Optional[Pet]:
        """
        Find a pet by its ID.

        Args:
            pet_id: Unique pet identifier

        Returns:
            Pet entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_owner_id(self, owner_id: str) -> List[Pet]:
        """
        Find all pets of an owner.

        Args:
            owner_id: Owner identifier

        Returns:
            List of pet entities (empty if the owner has none)
        """
        pass

    @abstractmethod
    def save(self, pet: Pet) -> Pet:
        """
        Insert or update a pet.

        A pet without an ID is inserted and receives a new ID; a pet
        with an ID replaces the stored record.

        Args:
            pet: Pet entity to persist

        Returns:
            Persisted pet entity
        """
        pass
