# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, read once at import.
"""

import os


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "employee-directory")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "5000"))

    STORAGE_BACKEND: str = os.getenv("STORAGE_BACKEND", "memory").strip().lower()
    DATA_FILE: str = os.getenv("DATA_FILE", "data/employees.json")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./employees.db")
    POOL_RECYCLE: int = int(os.getenv("DB_POOL_RECYCLE", "300"))

    WEBHOOK_URL: str = os.getenv(
        "WEBHOOK_URL", "http://localhost:5678/webhook/send-email"
    )
    WEBHOOK_TIMEOUT: float = float(os.getenv("WEBHOOK_TIMEOUT", "10.0"))

    SEED_SAMPLE_DATA: bool = _env_bool("SEED_SAMPLE_DATA", "true")
    DEBUG_ENDPOINT_ENABLED: bool = _env_bool("DEBUG_ENDPOINT_ENABLED", "true")
    STATIC_DIR: str = os.getenv("STATIC_DIR", "")

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
