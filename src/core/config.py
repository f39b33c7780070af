"""
Configuration for the Coaching Program Backend
All values are read from the environment once, at import time.
"""
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _split_csv(value: str) -> List[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


class Config:
    """Centralized configuration for the backend"""

    # ===== Database =====
    # Falls back to a local SQLite file for development
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./coaching.db")
    SQL_ECHO: bool = os.getenv("SQL_ECHO", "false").lower() == "true"

    # ===== API =====
    SERVICE_NAME: str = "Coaching Program API"
    VERSION: str = "1.0.0"
    CORS_ORIGINS: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))

    # ===== Logging =====
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ===== Rendering =====
    # Upper bound on the raw JSON dump shown for unrecognized program documents
    RAW_VIEW_MAX_CHARS: int = int(os.getenv("RAW_VIEW_MAX_CHARS", "20000"))

    # ===== Generation =====
    STORE_RETRY_AFTER_SECONDS: int = int(os.getenv("STORE_RETRY_AFTER_SECONDS", "5"))

    @classmethod
    def is_sqlite(cls) -> bool:
        return cls.DATABASE_URL.startswith("sqlite")


def configure_logging(level: Optional[str] = None):
    """Configure root logging for the API process and CLI scripts."""
    logging.basicConfig(
        level=getattr(logging, level or Config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

