# todo_api/config/settings.py
# Runtime configuration, read once from the environment at startup

import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


class ConfigurationError(RuntimeError):
    """Raised when a required setting is missing or malformed"""


class Settings(BaseModel):
    """Immutable application settings"""

    database_url: str = "sqlite+aiosqlite:///./todo.db"
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    frontend_url: str = "http://localhost:3000"
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"

    model_config = {
        "frozen": True
    }

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "Settings":
        """Build settings from os.environ, loading a .env file first"""
        load_dotenv(env_file)

        secret_key = os.getenv("SECRET_KEY") or os.getenv("JWT_SECRET")
        if not secret_key:
            raise ConfigurationError("SECRET_KEY (or JWT_SECRET) must be set")

        try:
            return cls(
                database_url=os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./todo.db"),
                secret_key=secret_key,
                algorithm=os.getenv("ALGORITHM", "HS256"),
                access_token_expire_minutes=int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", 60 * 24)),
                frontend_url=os.getenv("FRONTEND_URL", "http://localhost:3000"),
                host=os.getenv("HOST", "0.0.0.0"),
                port=int(os.getenv("PORT", "8000")),
                reload=os.getenv("RELOAD", "false").lower() == "true",
                log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            )
        except ValueError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
