# fleet_api/stores/vehicle.py
from typing import Any, Dict, List

from bson import ObjectId
from fleet_api.models.vehicle import VehicleModel
from fleet_api.schemas.vehicle import VehicleUpdate
from fleet_api.stores.base import DocumentStore

class VehicleStore(DocumentStore):
    resource = "Vehicle"
    collection_name = "vehicles"
    document_model = VehicleModel
    update_model = VehicleUpdate

    async def get_many(self, vehicle_ids: List[ObjectId]) -> List[Dict[str, Any]]:
        """Resolve references in order, dropping the ones that no longer exist."""
        if not vehicle_ids:
            return []
        found = await self.collection.find({"_id": {"$in": list(vehicle_ids)}}).to_list(length=None)
        by_id = {vehicle["_id"]: vehicle for vehicle in found}
        return [by_id[oid] for oid in vehicle_ids if oid in by_id]
