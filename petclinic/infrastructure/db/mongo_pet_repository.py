"""
MongoDB Pet Repository
======================

Concrete implementation of PetRepository using MongoDB.
"""
import logging
from typing import List, Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

from petclinic.domain.constants.pet_fields import PetFields
from petclinic.domain.models.pet import Pet
from petclinic.domain.repositories.pet_repository import PetRepository
from petclinic.utils.datetime_utils import now, parse_date, to_iso_date

logger = logging.getLogger(__name__)


class MongoPetRepository(PetRepository):
    """
    MongoDB implementation of PetRepository.

    Birth dates are stored as ISO strings since BSON has no date-only type.
    """

    def __init__(self, collection: Collection):
        self._collection = collection
        self._collection.create_index([(PetFields.ID, ASCENDING)], unique=True)
        self._collection.create_index([(PetFields.OWNER_ID, ASCENDING)])

    def _to_entity(self, doc: dict) -> Pet:
        """Convert MongoDB document to Pet entity."""
        return Pet(
            id=doc.get(PetFields.ID),
            name=doc.get(PetFields.NAME),
            type=doc.get(PetFields.TYPE),
            birth_date=parse_date(doc.get(PetFields.BIRTH_DATE)),
            owner_id=doc.get(PetFields.OWNER_ID),
            created_at=doc.get(PetFields.CREATED_AT, now()),
            updated_at=doc.get(PetFields.UPDATED_AT, now()),
        )

    def _to_document(self, pet: Pet) -> dict:
        """Convert Pet entity to MongoDB document."""
        return {
            PetFields.ID: pet.id,
            PetFields.NAME: pet.name,
            PetFields.TYPE: pet.type,
            PetFields.BIRTH_DATE: to_iso_date(pet.birth_date),
            PetFields.OWNER_ID: pet.owner_id,
            PetFields.CREATED_AT: pet.created_at,
            PetFields.UPDATED_AT: pet.updated_at,
        }

    def find_by_id(self, pet_id: str) -> Optional[Pet]:
        """Find a pet by its ID."""
        doc = self._collection.find_one({PetFields.ID: pet_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_owner_id(self, owner_id: str) -> List[Pet]:
        """Find all pets of an owner."""
        docs = self._collection.find({PetFields.OWNER_ID: owner_id}).sort(PetFields.CREATED_AT, ASCENDING)
        return [self._to_entity(doc) for doc in docs]

    def save(self, pet: Pet) -> Pet:
        """Insert a new pet or update an existing one."""
        pet.updated_at = now()

        if pet.is_new():
            pet.id = str(ObjectId())
            pet.created_at = pet.updated_at
            self._collection.insert_one(self._to_document(pet))
            logger.debug(f"Inserted pet {pet.id}")
            return pet

        doc = self._to_document(pet)
        result = self._collection.find_one_and_update(
            {PetFields.ID: pet.id},
            {
                "$set": {k: v for k, v in doc.items() if k != PetFields.CREATED_AT},
                "$setOnInsert": {PetFields.CREATED_AT: pet.created_at},
            },
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.debug(f"Updated pet {pet.id}")
        return self._to_entity(result)
