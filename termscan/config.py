"""
termscan Configuration

Central settings loaded from environment variables.
"""

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()


@dataclass(frozen=True)
class Settings:
    """Immutable application settings."""

    # --- Versioning ---
    LEXICON_VERSION: str = "1.0.0"

    # --- Logging ---
    LOG_LEVEL: str = os.getenv("TERMSCAN_LOG_LEVEL", "INFO").upper()
    LOG_FORMAT: str = os.getenv("TERMSCAN_LOG_FORMAT", "json")  # "json" or "text"


settings = Settings()
