# fleet_api/schemas/vehicle.py
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class VehicleUpdate(BaseModel):
    type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    license_plate_number: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_update(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)

class VehicleOut(BaseModel):
    id: str = Field(..., alias="_id")
    type: Optional[str] = None
    brand: Optional[str] = None
    model: Optional[str] = None
    license_plate_number: Optional[str] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "VehicleOut":
        return cls(_id=str(document["_id"]), **{k: v for k, v in document.items() if k != "_id"})
