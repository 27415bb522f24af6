"""
Application configuration loaded from environment variables.
"""
from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "akira_db"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60

    # Password hashing
    bcrypt_rounds: int = 12

    # Roles
    default_role: str = "ROLE_USER"
    seed_default_roles: bool = True

    # Logging
    log_level: str = "INFO"

    # CORS
    cors_origins: list[str] = [
        "http://localhost:4200",  # Storefront dev server
        "http://localhost:3000",
    ]

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
