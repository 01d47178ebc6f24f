# fleet_api/schemas/user.py
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from fleet_api.utils.object_id import PyObjectId

class UserUpdate(BaseModel):
    """A PUT body. Every field is written; missing ones become null."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    vehicles: Optional[List[PyObjectId]] = None

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        coerce_numbers_to_str=True,
    )

    def to_update(self) -> Dict[str, Any]:
        changes = self.model_dump(by_alias=True)
        if changes["vehicles"] is None:
            changes["vehicles"] = []
        return changes

class UserOut(BaseModel):
    id: str = Field(..., alias="_id")
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    vehicles: List[str] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "UserOut":
        fields = {k: v for k, v in document.items() if k not in ("_id", "vehicles")}
        return cls(
            _id=str(document["_id"]),
            vehicles=[str(v) for v in document.get("vehicles") or []],
            **fields
        )
