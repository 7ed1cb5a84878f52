"""
Configuration settings for the Job Board backend
Values come from the environment or a local .env file
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    # Application
    APP_NAME: str = "Job Board API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False  # When on, 500 responses carry the exception text
    API_PREFIX: str = "/api/v1"

    # Database (PostgreSQL in production, SQLite locally)
    DATABASE_URL: str = "sqlite:///./jobboard.db"
    DB_ECHO: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"

    # Frontends allowed to call the API with credentials
    CORS_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
    ]

    class Config:
        env_file = ".env"
        extra = "allow"


settings = Settings()
