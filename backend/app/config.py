"""
Centralized application configuration.
All settings live in one place and are loaded from the environment / .env.
"""
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Main system settings."""

    # ============================================
    # APPLICATION
    # ============================================
    APP_TITLE: str = "Hospital Administration Backend"
    APP_DESCRIPTION: str = "Admissions, beds and role dashboards for hospital staff"
    APP_VERSION: str = "1.0.0"
    APP_ENV: str = "development"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # ============================================
    # DATABASE
    # ============================================
    DATABASE_URL: str = "sqlite:///./hospital_admin.db"
    SEED_DEMO_DATA: bool = True

    # ============================================
    # CORS
    # ============================================
    CORS_ORIGINS: List[str] = ["*"]
    CORS_ALLOW_CREDENTIALS: bool = True
    CORS_ALLOW_METHODS: List[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    CORS_ALLOW_HEADERS: List[str] = ["Content-Type", "Authorization", "X-Requested-With"]

    # ============================================
    # JWT
    # ============================================
    JWT_SECRET_KEY: str = "change-this-secret-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24
    JWT_ISSUER: str = "hospital-admin"

    # ============================================
    # LOGGING
    # ============================================
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
