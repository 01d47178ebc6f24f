# fleet_api/database.py
import logging

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError
from fleet_api.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

class Database:
    client: AsyncIOMotorClient = None
    db: AsyncIOMotorDatabase = None

db = Database()

async def connect_to_mongo():
    db.client = AsyncIOMotorClient(settings.MONGODB_URI)
    db.db = db.client[settings.MONGODB_DB_NAME]
    logger.info("Connected to MongoDB: %s", settings.MONGODB_DB_NAME)

async def close_mongo_connection():
    if db.client:
        db.client.close()
        db.client = None
        db.db = None
        logger.info("Closed MongoDB connection")

async def get_database() -> AsyncIOMotorDatabase:
    return db.db

async def init_db():
    if not db.client:
        await connect_to_mongo()
    try:
        collections = await db.db.list_collection_names()
        if "users" not in collections:
            await db.db.create_collection("users")
        if "vehicles" not in collections:
            await db.db.create_collection("vehicles")

        # Nested lookups go through the reference list
        await db.db.users.create_index([("vehicles", ASCENDING)])

        logger.info("Database initialized successfully")
        return True
    except PyMongoError as e:
        logger.error("Database initialization failed: %s", e)
        return False
