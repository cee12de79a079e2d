"""
In-Memory Repositories
======================

Dictionary-backed implementations of the repository interfaces.
Used for local runs without MongoDB and by the test suite.
"""
import logging
import threading
import uuid
from dataclasses import replace
from typing import Dict, List, Optional

from petclinic.domain.models.owner import Owner
from petclinic.domain.models.pet import Pet
from petclinic.domain.repositories.owner_repository import OwnerRepository
from petclinic.domain.repositories.pet_repository import PetRepository
from petclinic.utils.datetime_utils import now

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


class InMemoryPetRepository(PetRepository):
    """
    In-memory implementation of PetRepository.

    Entities are copied on the way in and out so callers never share
    state with the store.
    """

    def __init__(self) -> None:
        self._pets: Dict[str, Pet] = {}
        self._lock = threading.Lock()

    def find_by_id(self, pet_id: str) -> Optional[Pet]:
        with self._lock:
            pet = self._pets.get(pet_id)
            return replace(pet) if pet else None

    def find_by_owner_id(self, owner_id: str) -> List[Pet]:
        with self._lock:
            return [replace(pet) for pet in self._pets.values() if pet.owner_id == owner_id]

    def save(self, pet: Pet) -> Pet:
        with self._lock:
            pet.updated_at = now()
            if pet.is_new():
                pet.id = _new_id()
                pet.created_at = pet.updated_at
                logger.debug(f"Inserted pet {pet.id}")
            else:
                existing = self._pets.get(pet.id)
                if existing is not None:
                    pet.created_at = existing.created_at
                logger.debug(f"Updated pet {pet.id}")
            self._pets[pet.id] = replace(pet)
            return replace(pet)

    def count(self) -> int:
        with self._lock:
            return len(self._pets)


class InMemoryOwnerRepository(OwnerRepository):
    """In-memory implementation of OwnerRepository."""

    def __init__(self) -> None:
        self._owners: Dict[str, Owner] = {}
        self._lock = threading.Lock()

    def find_by_id(self, owner_id: str) -> Optional[Owner]:
        with self._lock:
            owner = self._owners.get(owner_id)
            return replace(owner, pets=[]) if owner else None

    def save(self, owner: Owner) -> Owner:
        with self._lock:
            if not owner.id:
                owner.id = _new_id()
            self._owners[owner.id] = replace(owner, pets=[])
            logger.debug(f"Saved owner {owner.id}")
            return replace(owner, pets=[])
