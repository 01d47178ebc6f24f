# fleet_api/routes/user.py
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status
from fleet_api.dependencies import get_user_store
from fleet_api.schemas.user import UserOut
from fleet_api.stores import UserStore

router = APIRouter()

@router.get("/users", response_model=List[UserOut])
async def get_users(store: UserStore = Depends(get_user_store)):
    users = await store.list()
    return [UserOut.from_document(user) for user in users]

@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: str, store: UserStore = Depends(get_user_store)):
    user = await store.require(user_id)
    return UserOut.from_document(user)

@router.post("/users", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: Any = Body(None), store: UserStore = Depends(get_user_store)):
    created_user = await store.create(payload)
    return UserOut.from_document(created_user)

@router.put("/users/{user_id}", response_model=UserOut)
async def update_user(user_id: str, payload: Any = Body(None), store: UserStore = Depends(get_user_store)):
    updated_user = await store.update(user_id, payload or {})
    return UserOut.from_document(updated_user)

@router.delete("/users/{user_id}")
async def delete_user(user_id: str, store: UserStore = Depends(get_user_store)):
    # Vehicles the user referenced are left in place
    await store.delete(user_id)
    return Response(status_code=status.HTTP_200_OK)
