"""Configuration management."""
import logging
import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


def _optional_decimals(name: str) -> Optional[int]:
    """Read a non-negative int from the environment, None if unset or invalid."""
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return None
    try:
        decimals = int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer")
        return None
    if decimals < 0:
        logger.warning(f"Ignoring {name}={value!r}: must not be negative")
        return None
    return decimals


class Config:
    """Application configuration."""

    # Input
    INPUT_FILE = os.getenv("CATALOG_INPUT_FILE", "input.txt")

    # Output
    OUTPUT_FORMAT = os.getenv("CATALOG_OUTPUT_FORMAT", "line")
    PRICE_DECIMALS = _optional_decimals("CATALOG_PRICE_DECIMALS")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
