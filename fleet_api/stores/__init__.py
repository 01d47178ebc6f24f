# fleet_api/stores/__init__.py
from .user import UserStore
from .vehicle import VehicleStore
from .ownership import OwnershipCoordinator
