# fleet_api/utils/object_id.py
from typing import Any, Optional

from bson import ObjectId, errors
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Return the ObjectId for ``value``, or None when it is not a valid id."""
    if isinstance(value, ObjectId):
        return value
    # ObjectId(None) would generate a fresh id
    if value is None:
        return None
    try:
        return ObjectId(value)
    except (errors.InvalidId, TypeError):
        return None

class PyObjectId(ObjectId):
    """ObjectId accepted from, and rendered as, its 24 character hex string."""

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.json_or_python_schema(
            json_schema=core_schema.no_info_after_validator_function(
                cls.validate, core_schema.str_schema()
            ),
            python_schema=core_schema.no_info_plain_validator_function(cls.validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )

    @classmethod
    def validate(cls, value: Any) -> ObjectId:
        oid = parse_object_id(value)
        if oid is None:
            raise ValueError(f"'{value}' is not a valid ObjectId")
        return oid
