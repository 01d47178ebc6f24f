# fleet_api/routes/user_vehicle.py
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status
from fleet_api.dependencies import get_ownership
from fleet_api.schemas.vehicle import VehicleOut
from fleet_api.stores import OwnershipCoordinator

router = APIRouter()

@router.get("/users/{user_id}/vehicles", response_model=List[VehicleOut])
async def get_user_vehicles(user_id: str, ownership: OwnershipCoordinator = Depends(get_ownership)):
    """List the vehicles a user references, skipping ones that were deleted."""
    vehicles = await ownership.list_vehicles(user_id)
    return [VehicleOut.from_document(vehicle) for vehicle in vehicles]

@router.get("/users/{user_id}/vehicles/{vehicle_id}", response_model=VehicleOut)
async def get_user_vehicle(
    user_id: str,
    vehicle_id: str,
    ownership: OwnershipCoordinator = Depends(get_ownership)
):
    vehicle = await ownership.get_vehicle(user_id, vehicle_id)
    return VehicleOut.from_document(vehicle)

@router.post("/users/{user_id}/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED)
async def create_user_vehicle(
    user_id: str,
    payload: Any = Body(None),
    ownership: OwnershipCoordinator = Depends(get_ownership)
):
    """Create a vehicle and append it to the user's vehicle list."""
    created_vehicle = await ownership.create_vehicle(user_id, payload)
    return VehicleOut.from_document(created_vehicle)

@router.put("/users/{user_id}/vehicles/{vehicle_id}", response_model=VehicleOut)
async def update_user_vehicle(
    user_id: str,
    vehicle_id: str,
    payload: Any = Body(None),
    ownership: OwnershipCoordinator = Depends(get_ownership)
):
    # Membership in the user's list is not checked
    updated_vehicle = await ownership.update_vehicle(user_id, vehicle_id, payload or {})
    return VehicleOut.from_document(updated_vehicle)

@router.delete("/users/{user_id}/vehicles/{vehicle_id}")
async def delete_user_vehicle(
    user_id: str,
    vehicle_id: str,
    ownership: OwnershipCoordinator = Depends(get_ownership)
):
    await ownership.delete_vehicle(user_id, vehicle_id)
    return Response(status_code=status.HTTP_200_OK)
