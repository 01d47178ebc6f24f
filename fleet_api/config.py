# fleet_api/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

class Settings(BaseSettings):
    # MongoDB settings
    MONGODB_URI: str
    MONGODB_DB_NAME: str = "fleet"

    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False
    LOG_LEVEL: str = "INFO"

    # API settings
    API_PREFIX: str = "/api"

    # Authentication settings
    JWT_SECRET: str
    JWT_MAGIC_CODE: str
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24
    # When False, an invalid token still reaches the route handler
    AUTH_STRICT: bool = False

    model_config = SettingsConfigDict(env_file=".env")

@lru_cache()
def get_settings():
    return Settings()
