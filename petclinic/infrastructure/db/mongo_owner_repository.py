"""
MongoDB Owner Repository
========================

Concrete implementation of OwnerRepository using MongoDB.
"""
import logging
from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING, ReturnDocument
from pymongo.collection import Collection

from petclinic.domain.constants.owner_fields import OwnerFields
from petclinic.domain.models.owner import Owner
from petclinic.domain.repositories.owner_repository import OwnerRepository

logger = logging.getLogger(__name__)


class MongoOwnerRepository(OwnerRepository):
    """MongoDB implementation of OwnerRepository."""

    def __init__(self, collection: Collection):
        self._collection = collection
        self._collection.create_index([(OwnerFields.ID, ASCENDING)], unique=True)

    def _to_entity(self, doc: dict) -> Owner:
        return Owner(
            id=doc[OwnerFields.ID],
            first_name=doc.get(OwnerFields.FIRST_NAME, ""),
            last_name=doc.get(OwnerFields.LAST_NAME, ""),
            address=doc.get(OwnerFields.ADDRESS, ""),
            city=doc.get(OwnerFields.CITY, ""),
            telephone=doc.get(OwnerFields.TELEPHONE, ""),
        )

    def _to_document(self, owner: Owner) -> dict:
        # Pets live in their own collection
        return {
            OwnerFields.ID: owner.id,
            OwnerFields.FIRST_NAME: owner.first_name,
            OwnerFields.LAST_NAME: owner.last_name,
            OwnerFields.ADDRESS: owner.address,
            OwnerFields.CITY: owner.city,
            OwnerFields.TELEPHONE: owner.telephone,
        }

    def find_by_id(self, owner_id: str) -> Optional[Owner]:
        """Find an owner by its ID."""
        doc = self._collection.find_one({OwnerFields.ID: owner_id})
        if not doc:
            return None
        return self._to_entity(doc)

    def save(self, owner: Owner) -> Owner:
        """Insert or update an owner."""
        if not owner.id:
            owner.id = str(ObjectId())

        result = self._collection.find_one_and_update(
            {OwnerFields.ID: owner.id},
            {"$set": self._to_document(owner)},
            upsert=True,
            return_document=ReturnDocument.AFTER,
        )
        logger.debug(f"Saved owner {owner.id}")
        return self._to_entity(result)
