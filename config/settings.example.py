"""Example configuration file. Copy this to settings.py and adjust values."""

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent


def _get_int_env(key: str, default: int) -> int:
    """Safely get integer from environment variable."""
    try:
        value = os.getenv(key)
        if value is None:
            return default
        return int(value)
    except (ValueError, TypeError):
        logging.warning(f"Invalid value for {key}, using default: {default}")
        return default


def _get_float_env(key: str, default: float) -> float:
    """Safely get float from environment variable."""
    try:
        value = os.getenv(key)
        if value is None:
            return default
        return float(value)
    except (ValueError, TypeError):
        logging.warning(f"Invalid value for {key}, using default: {default}")
        return default


# Database settings
DATABASE_PATH = os.getenv("DATABASE_PATH", str(BASE_DIR / "data" / "recruitment.db"))
DB_TIMEOUT_SECONDS = _get_float_env("DB_TIMEOUT_SECONDS", 30.0)

# Business rules
# Maximum number of Pending applications a single candidate may hold
PENDING_APPLICATION_LIMIT = _get_int_env("PENDING_APPLICATION_LIMIT", 3)

# Export settings
EXPORT_DIR = os.getenv("EXPORT_DIR", str(BASE_DIR / "data" / "exports"))

# Logging settings
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
VERBOSE = os.getenv("VERBOSE", "false").lower() == "true"
