# fleet_api/models/vehicle.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class VehicleModel(BaseModel):
    type: str = Field(..., min_length=1)
    brand: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    license_plate_number: str = Field(..., min_length=1)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
