# fleet_api/stores/ownership.py
import logging
from typing import Any, Dict, List

from pymongo.errors import PyMongoError
from fleet_api.errors import StoreFailure
from fleet_api.stores.user import UserStore
from fleet_api.stores.vehicle import VehicleStore
from fleet_api.utils.object_id import parse_object_id

logger = logging.getLogger(__name__)

class OwnershipCoordinator:
    """
    Vehicle operations scoped under the user that references them.

    The user is always resolved first. References are weak: nothing here
    removes an id from a user's ``vehicles`` list, and ids whose vehicle is
    gone are skipped when read.
    """

    def __init__(self, users: UserStore, vehicles: VehicleStore):
        self.users = users
        self.vehicles = vehicles

    async def resolve_owner(self, user_id: Any) -> Dict[str, Any]:
        # Any failure to load the owner is reported as a missing owner
        try:
            user = await self.users.get(user_id)
        except PyMongoError as e:
            logger.warning("Lookup of user %s failed: %s", user_id, e)
            user = None
        if user is None:
            raise self.users.not_found(user_id)
        return user

    async def list_vehicles(self, user_id: Any) -> List[Dict[str, Any]]:
        user = await self.resolve_owner(user_id)
        return await self.vehicles.get_many(user.get("vehicles") or [])

    async def get_vehicle(self, user_id: Any, vehicle_id: Any) -> Dict[str, Any]:
        user = await self.resolve_owner(user_id)
        vehicle_oid = parse_object_id(vehicle_id)
        if vehicle_oid is None or vehicle_oid not in (user.get("vehicles") or []):
            raise self.vehicles.not_found(vehicle_id)
        return await self.vehicles.require(vehicle_oid)

    async def create_vehicle(self, user_id: Any, payload: Any) -> Dict[str, Any]:
        user = await self.resolve_owner(user_id)
        vehicle = self.vehicles.validate(payload, with_body=False)

        created = await self.vehicles.insert(vehicle)
        try:
            linked = await self.users.link_vehicle(user["_id"], created["_id"])
        except PyMongoError as e:
            await self._discard(created)
            raise StoreFailure("Vehicle creation failed", str(e))

        if not linked:
            await self._discard(created)
            raise self.users.not_found(user_id)
        return created

    async def update_vehicle(self, user_id: Any, vehicle_id: Any, payload: Any) -> Dict[str, Any]:
        await self.resolve_owner(user_id)
        return await self.vehicles.update(vehicle_id, payload)

    async def delete_vehicle(self, user_id: Any, vehicle_id: Any) -> None:
        await self.resolve_owner(user_id)
        await self.vehicles.delete(vehicle_id)

    async def _discard(self, vehicle: Dict[str, Any]) -> None:
        logger.warning("Removing vehicle %s that could not be linked", vehicle["_id"])
        try:
            await self.vehicles.remove(vehicle["_id"])
        except PyMongoError as e:
            logger.error("Could not remove orphaned vehicle %s: %s", vehicle["_id"], e)
