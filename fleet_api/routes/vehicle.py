# fleet_api/routes/vehicle.py
from typing import Any, List

from fastapi import APIRouter, Body, Depends, Response, status
from fleet_api.dependencies import get_vehicle_store
from fleet_api.schemas.vehicle import VehicleOut
from fleet_api.stores import VehicleStore

router = APIRouter()

@router.get("/vehicles", response_model=List[VehicleOut])
async def get_vehicles(store: VehicleStore = Depends(get_vehicle_store)):
    vehicles = await store.list()
    return [VehicleOut.from_document(vehicle) for vehicle in vehicles]

@router.get("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def get_vehicle(vehicle_id: str, store: VehicleStore = Depends(get_vehicle_store)):
    vehicle = await store.require(vehicle_id)
    return VehicleOut.from_document(vehicle)

@router.post("/vehicles", response_model=VehicleOut, status_code=status.HTTP_201_CREATED)
async def create_vehicle(payload: Any = Body(None), store: VehicleStore = Depends(get_vehicle_store)):
    created_vehicle = await store.create(payload)
    return VehicleOut.from_document(created_vehicle)

@router.put("/vehicles/{vehicle_id}", response_model=VehicleOut)
async def update_vehicle(vehicle_id: str, payload: Any = Body(None), store: VehicleStore = Depends(get_vehicle_store)):
    updated_vehicle = await store.update(vehicle_id, payload or {})
    return VehicleOut.from_document(updated_vehicle)

@router.delete("/vehicles/{vehicle_id}")
async def delete_vehicle(vehicle_id: str, store: VehicleStore = Depends(get_vehicle_store)):
    # References held by users are not cleaned up
    await store.delete(vehicle_id)
    return Response(status_code=status.HTTP_200_OK)
