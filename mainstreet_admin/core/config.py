# mainstreet_admin/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    PROJECT_NAME: str = "Main Street Admin API"
    DATABASE_URL: str = "sqlite:///./mainstreet.db"
    JWT_SECRET_KEY: str = "change-me"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    LOG_LEVEL: str = "INFO"

    # uvicorn bind options for the `mainstreet-admin` entry point
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    RELOAD: bool = False

    # Seeded on startup when both are set
    FIRST_ADMIN_EMAIL: Optional[str] = None
    FIRST_ADMIN_PASSWORD: Optional[str] = None

    # CORS origins
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost:3000",  # for local development
        "http://localhost:5173",  # for local development
    ]

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
