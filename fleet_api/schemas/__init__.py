# fleet_api/schemas/__init__.py
from .auth import AuthRequest, AuthResponse
from .user import UserUpdate, UserOut
from .vehicle import VehicleUpdate, VehicleOut
