"""Environment-driven application settings, managed in one place."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./portal.db"
    SECRET_KEY: str = "change-me-to-a-random-secret-key"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:5173"]
    SERVER_PORT: int = 2022
    LOG_LEVEL: str = "INFO"

    # JWT
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Password hashing cost; tests lower this to keep bcrypt fast.
    BCRYPT_ROUNDS: int = 12

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
