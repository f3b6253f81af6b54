# app/config.py
from pydantic_settings import BaseSettings
from functools import lru_cache

class Settings(BaseSettings):
    # Server settings
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = True

    # API settings
    API_PREFIX: str = "/api"
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Store settings
    SEED_SAMPLE_DATA: bool = True
    SIMULATED_DELAY_SECONDS: float = 0.0

    class Config:
        env_file = ".env"

@lru_cache()
def get_settings():
    return Settings()
