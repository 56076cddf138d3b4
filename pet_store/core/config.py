from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import Optional

load_dotenv()

class Settings(BaseSettings):
    PROJECT_NAME: str = "Pet Store API"
    DATABASE_URL: str = "sqlite:///./pet_store.db"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # slowapi limit string applied to write endpoints
    RATE_LIMIT: str = "60/minute"
    RATE_LIMIT_ENABLED: bool = True

    # Pool sizing, ignored for SQLite
    DB_POOL_SIZE: int = 5
    DB_MAX_OVERFLOW: int = 10
    DB_POOL_TIMEOUT: int = 30
    DB_POOL_RECYCLE: int = 3600

    CORS_ORIGINS: str = "*"

    class Config:
        env_file = ".env"
        extra = "allow"  # This allows extra fields

    @property
    def cors_origins(self):
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
