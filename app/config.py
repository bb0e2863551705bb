# app/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./church_visitors.db"

    # ── Local storage ─────────────────────────────────────────────────────
    STORAGE_KEY: str = "church-visitors"   # Key holding the JSON visitor array

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080
    CORS_ORIGINS: list[str] = ["*"]

    # ── Locale ────────────────────────────────────────────────────────────
    TIMEZONE: str = "America/Sao_Paulo"    # Used for export timestamps and filenames

    # ── Exports ───────────────────────────────────────────────────────────
    CLEAR_AFTER_SPREADSHEET_EXPORT: bool = False   # Irreversible: wipes the list after .xlsx export

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
