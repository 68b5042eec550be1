"""
Bullseye

Live cattle detection with throttled breed classification. Samples a
camera feed, detects cows, classifies at most one capture per cooldown
window and keeps a breed leaderboard plus a bounded capture history.

Package structure:
  core/       - Label mapping, leaderboard, history, throttle, pipeline, loop
  models/     - Data models and capability protocols
  vision/     - OpenCV and Ultralytics collaborators
  config/     - Configuration loading and validation
  utils/      - Constants
"""

__version__ = "1.0.0"

from .config import Config, ConfigValidationError, load_config
from .core import (
    CaptureBuffer,
    CaptureThrottle,
    ClassificationPipeline,
    DetectionLoop,
    LabelMapper,
    Leaderboard,
    SessionState,
)
from .models import (
    BoundingBox,
    CaptureRecord,
    Detection,
    LabelCandidate,
    LeaderboardEntry,
)

__all__ = [
    "BoundingBox",
    # Core
    "CaptureBuffer",
    "CaptureRecord",
    "CaptureThrottle",
    "ClassificationPipeline",
    # Config
    "Config",
    "ConfigValidationError",
    # Models
    "Detection",
    "DetectionLoop",
    "LabelCandidate",
    "LabelMapper",
    "Leaderboard",
    "LeaderboardEntry",
    "SessionState",
    "load_config",
]
