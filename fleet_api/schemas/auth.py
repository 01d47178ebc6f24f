# fleet_api/schemas/auth.py
from typing import Any, Optional

from pydantic import BaseModel, Field

class AuthRequest(BaseModel):
    # Compared verbatim against the configured code, so any JSON value is accepted
    magic_code: Any = Field(None, alias="magicCode")

class AuthResponse(BaseModel):
    success: bool
    message: str
    token: Optional[str] = None
