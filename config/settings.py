"""Application settings and configuration management."""

import os
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).parent.parent
DEFAULT_DATA_PATH = PROJECT_ROOT / "data" / "district_data.csv"


def is_remote_source(source: str) -> bool:
    """Whether a data source is an http(s) URL rather than a local path."""
    return str(source).lower().startswith(("http://", "https://"))


class Settings:
    """Application settings loaded from environment variables."""

    # District data file (local path or http(s) URL)
    DATA_SOURCE: str = os.getenv("DISTRICT_DATA_SOURCE", str(DEFAULT_DATA_PATH))
    NAME_FIELD: str = "clean_name"
    NOT_AVAILABLE: str = "NA"

    # Remote fetch settings
    REQUEST_TIMEOUT_SECONDS: float = float(os.getenv("REQUEST_TIMEOUT_SECONDS", "30"))

    # Cache settings
    CACHE_TTL_SECONDS: int = 86400  # 24 hours

    # Search settings
    MIN_QUERY_LENGTH: int = 2

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def has_remote_source(self) -> bool:
        return is_remote_source(self.DATA_SOURCE)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
