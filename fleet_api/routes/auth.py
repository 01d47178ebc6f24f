# fleet_api/routes/auth.py
from typing import Any

from fastapi import APIRouter, Body
from fleet_api.config import get_settings
from fleet_api.schemas.auth import AuthRequest, AuthResponse
from fleet_api.security import authenticate

router = APIRouter()

@router.post("/authenticate", response_model=AuthResponse, response_model_exclude_none=True)
async def issue_token(payload: Any = Body(None)):
    """Exchange the magic code for a bearer token valid for one day."""
    # Bodies that are not JSON objects carry no code and just fail to authenticate
    magic_code = AuthRequest.model_validate(payload).magic_code if isinstance(payload, dict) else None
    return authenticate(magic_code, get_settings())
