# fleet_api/models/user.py
import re
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from fleet_api.utils.object_id import PyObjectId

EMAIL_REGEX = re.compile(
    r'^(([^<>()\[\]\\.,;:\s@"]+(\.[^<>()\[\]\\.,;:\s@"]+)*)|(".+"))'
    r'@((\[[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}\.[0-9]{1,3}])|(([a-zA-Z\-0-9]+\.)+[a-zA-Z]{2,}))$'
)

class UserModel(BaseModel):
    """A User document as it is written to the ``users`` collection."""

    first_name: str = Field(..., min_length=1)
    last_name: str = Field(..., min_length=1)
    email: Optional[str] = None
    phone_number: str = Field(..., min_length=1)
    vehicles: List[PyObjectId] = Field(default_factory=list)

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        arbitrary_types_allowed=True,
        coerce_numbers_to_str=True,
    )

    @field_validator("email")
    @classmethod
    def check_email(cls, value: Optional[str]) -> Optional[str]:
        if value and not EMAIL_REGEX.match(value):
            raise ValueError(f"email '{value}' is invalid")
        return value

    @field_validator("vehicles", mode="before")
    @classmethod
    def default_vehicles(cls, value):
        return [] if value is None else value

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
