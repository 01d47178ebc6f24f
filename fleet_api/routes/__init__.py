#fleet_api/routes/__init__.py

from .auth import router as auth_router
from .user import router as user_router
from .vehicle import router as vehicle_router
from .user_vehicle import router as user_vehicle_router
