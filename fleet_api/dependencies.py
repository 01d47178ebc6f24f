# fleet_api/dependencies.py
from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase
from fleet_api.database import get_database
from fleet_api.stores import OwnershipCoordinator, UserStore, VehicleStore

def get_user_store(db: AsyncIOMotorDatabase = Depends(get_database)) -> UserStore:
    return UserStore(db)

def get_vehicle_store(db: AsyncIOMotorDatabase = Depends(get_database)) -> VehicleStore:
    return VehicleStore(db)

def get_ownership(
    users: UserStore = Depends(get_user_store),
    vehicles: VehicleStore = Depends(get_vehicle_store),
) -> OwnershipCoordinator:
    return OwnershipCoordinator(users, vehicles)
