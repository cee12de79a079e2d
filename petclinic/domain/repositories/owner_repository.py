"""
Owner Repository Interface
==========================

Abstract interface for owner data access.
"""
from abc import ABC, abstractmethod
from typing import Optional

from petclinic.domain.models.owner import Owner


class OwnerRepository(ABC):
    """Abstract repository for owner persistence operations."""

    @abstractmethod
    def find_by_id(self, owner_id: str) -> Optional[Owner]:
        """
        Find an owner by its ID.

        Args:
            owner_id: Unique owner identifier

        Returns:
            Owner entity if found, None otherwise
        """
        pass

    @abstractmethod
    def save(self, owner: Owner) -> Owner:
        """
        Insert or update an owner.

        Args:
            owner: Owner entity to persist

        Returns:
            Persisted owner entity
        """
        pass
