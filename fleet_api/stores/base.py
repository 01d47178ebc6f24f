# fleet_api/stores/base.py
import logging
from typing import Any, Dict, List, Optional, Type

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pydantic import BaseModel, ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from fleet_api.errors import NotFound, StoreFailure, ValidationFailed
from fleet_api.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)

class DocumentStore:
    """
    CRUD over one collection.

    Subclasses name the collection and the two pydantic models: the
    document model validates what gets inserted, the update model lists the
    fields a PUT body replaces.
    """

    resource: str = ""
    collection_name: str = ""
    document_model: Type[BaseModel]
    update_model: Type[BaseModel]

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[self.collection_name]

    def not_found(self, identifier: Any) -> NotFound:
        return NotFound(
            f"{self.resource} not found",
            f"No {self.resource.lower()} found with ID: {identifier}",
        )

    async def list(self) -> List[Dict[str, Any]]:
        return await self.collection.find().to_list(length=None)

    async def get(self, identifier: Any) -> Optional[Dict[str, Any]]:
        """Return the document, or None when the id is malformed or unknown."""
        oid = parse_object_id(identifier)
        if oid is None:
            return None
        return await self.collection.find_one({"_id": oid})

    async def require(self, identifier: Any) -> Dict[str, Any]:
        document = await self.get(identifier)
        if document is None:
            raise self.not_found(identifier)
        return document

    def validate(self, payload: Any, with_body: bool = True) -> BaseModel:
        try:
            return self.document_model.model_validate(payload)
        except ValidationError as e:
            raise ValidationFailed.from_pydantic(self.resource, e, with_body=with_body)

    async def insert(self, document: BaseModel) -> Dict[str, Any]:
        result = await self.collection.insert_one(document.to_document())
        return await self.collection.find_one({"_id": result.inserted_id})

    async def create(self, payload: Any) -> Dict[str, Any]:
        return await self.insert(self.validate(payload))

    async def update(self, identifier: Any, payload: Any) -> Dict[str, Any]:
        oid = parse_object_id(identifier)
        if oid is None:
            raise self.not_found(identifier)

        try:
            changes = self.update_model.model_validate(payload).to_update()
        except ValidationError as e:
            raise StoreFailure("Update failed", str(e))

        try:
            updated = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": changes},
                return_document=ReturnDocument.AFTER
            )
        except PyMongoError as e:
            raise StoreFailure("Update failed", str(e))

        if updated is None:
            raise self.not_found(identifier)
        return updated

    async def delete(self, identifier: Any) -> None:
        oid = parse_object_id(identifier)
        if oid is None:
            raise self.not_found(identifier)

        try:
            deleted = await self.collection.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise StoreFailure("Deletion failed", str(e))

        if deleted is None:
            raise self.not_found(identifier)

    async def remove(self, oid: ObjectId) -> None:
        """Delete by ObjectId without reporting whether it existed."""
        await self.collection.delete_one({"_id": oid})
