# expense_tracker/core/config.py

from pathlib import Path
from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Get the project root directory (where .env should be located)
BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding='utf-8',
        case_sensitive=True,
        extra="ignore"
    )

    # App Configuration
    APP_NAME: str = "Expense Tracker API"
    VERSION: str = "1.0.0"
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Database Configuration
    DATABASE_URL: str = "sqlite+aiosqlite:///./transactionManager.db"
    SQL_ECHO: bool = False
    CREATE_TABLES_ON_STARTUP: bool = True

    # CORS Configuration
    CORS_ORIGINS: List[str] = ["*"]

    # Reject budgets for categories that do not exist (off keeps the
    # historical behaviour where any categoryId is accepted)
    BUDGET_REQUIRE_CATEGORY: bool = False

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite"""
        return self.DATABASE_URL.startswith("sqlite")

# Create a global settings instance
settings = Settings()
