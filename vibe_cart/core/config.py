"""Vibe Cart Configuration"""

from functools import lru_cache
from typing import Literal

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Vibe Cart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 4000
    api_prefix: str = "/api"
    cors_origins: list[str] = ["*"]

    # Storage
    storage_backend: Literal["sqlite", "memory"] = "sqlite"
    db_path: str = "vibe_cart.db"

    # Every request acts on this cart until there is authentication
    demo_user_id: str = "demo"

    class Config:
        env_prefix = "VIBE_CART_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
