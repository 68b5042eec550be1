"""
Utility modules for constants and display formatting.
"""

from .constants import (
    BREED_CATALOG,
    DEFAULT_BUFFER_CAPACITY,
    DEFAULT_CAPTURE_COOLDOWN_MS,
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_INPUT_SIZE,
    DEFAULT_TARGET_CLASS,
    ENV_CAMERA_URL,
    SENTINEL_NO_CLASSIFIER,
    SENTINEL_PREDICTION_ERROR,
    SENTINEL_UNKNOWN,
)
from .formatting import percent

__all__ = [
    "BREED_CATALOG",
    "DEFAULT_BUFFER_CAPACITY",
    "DEFAULT_CAPTURE_COOLDOWN_MS",
    "DEFAULT_CONFIDENCE_THRESHOLD",
    "DEFAULT_INPUT_SIZE",
    "DEFAULT_TARGET_CLASS",
    "ENV_CAMERA_URL",
    # Sentinel categories
    "SENTINEL_NO_CLASSIFIER",
    "SENTINEL_PREDICTION_ERROR",
    "SENTINEL_UNKNOWN",
    "percent",
]
