# fleet_api/stores/user.py
from bson import ObjectId
from fleet_api.models.user import UserModel
from fleet_api.schemas.user import UserUpdate
from fleet_api.stores.base import DocumentStore

class UserStore(DocumentStore):
    resource = "User"
    collection_name = "users"
    document_model = UserModel
    update_model = UserUpdate

    async def link_vehicle(self, user_oid: ObjectId, vehicle_oid: ObjectId) -> bool:
        """Append a vehicle reference; False when the user no longer exists."""
        result = await self.collection.update_one(
            {"_id": user_oid},
            {"$push": {"vehicles": vehicle_oid}}
        )
        return result.matched_count == 1
