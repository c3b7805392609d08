"""
StockStar Configuration
Core settings for the inventory tracker
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    """Application settings"""

    # Application Info
    APP_NAME: str = "StockStar Inventory API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False

    # Database Configuration
    DATABASE_URL: str = "sqlite:///./stock-star.db"
    DATABASE_ECHO: bool = False

    # CORS
    CORS_ORIGINS: List[str] = [
        "http://localhost:1420",  # desktop shell dev server
        "http://localhost:3000",
        "tauri://localhost",
    ]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True
    LOG_DIR: Path = Path("logs")
    LOG_FILE: str = "app.log"
    ERROR_LOG_FILE: str = "error.log"

    # Pagination
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 500

    # Dashboard
    RECENT_TRANSACTION_DAYS: int = 7

    # API Configuration
    API_V1_STR: str = "/api/v1"
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_URL: str = "/openapi.json"

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the logging level name"""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return level

    class Config:
        env_file = ".env"
        case_sensitive = True


# Global settings instance
settings = Settings()
