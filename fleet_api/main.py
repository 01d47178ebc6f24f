# fleet_api/main.py
import logging

from fastapi import FastAPI
from contextlib import asynccontextmanager
from fleet_api.routes import auth_router, user_router, vehicle_router, user_vehicle_router
from fleet_api.database import connect_to_mongo, close_mongo_connection, init_db
from fleet_api.errors import register_exception_handlers
from fleet_api.security import TokenVerifierMiddleware
from fleet_api.config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    await connect_to_mongo()
    await init_db()
    yield
    # Shutdown
    await close_mongo_connection()

app = FastAPI(title="Fleet API", lifespan=lifespan)

app.add_middleware(
    TokenVerifierMiddleware,
    secret=settings.JWT_SECRET,
    algorithm=settings.JWT_ALGORITHM,
    prefix=settings.API_PREFIX,
    exempt_paths=[f"{settings.API_PREFIX}/authenticate"],
    strict=settings.AUTH_STRICT,
)
register_exception_handlers(app)

app.include_router(auth_router, prefix=settings.API_PREFIX, tags=["authentication"])
app.include_router(user_router, prefix=settings.API_PREFIX, tags=["users"])
app.include_router(vehicle_router, prefix=settings.API_PREFIX, tags=["vehicles"])
app.include_router(user_vehicle_router, prefix=settings.API_PREFIX, tags=["users/vehicles"])

@app.get("/")
async def root():
    return {"message": "Welcome to the Fleet API", "docs_url": "/docs"}

if __name__ == "__main__":
    import uvicorn
    logger.info("Starting Fleet API on %s:%s", settings.HOST, settings.PORT)
    uvicorn.run(
        "fleet_api.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
