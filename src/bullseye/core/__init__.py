"""
Core components: label mapping, tallies, history, throttling,
classification and the detection loop.
"""

from .capture_buffer import CaptureBuffer
from .detection_loop import DetectionLoop, LoopState, wall_clock_ms
from .label_mapper import LabelMapper, label_hash
from .leaderboard import Leaderboard
from .pipeline import ClassificationPipeline
from .session import SessionState
from .throttle import CaptureThrottle

__all__ = [
    "CaptureBuffer",
    "CaptureThrottle",
    "ClassificationPipeline",
    "DetectionLoop",
    "LabelMapper",
    "Leaderboard",
    "LoopState",
    "SessionState",
    "label_hash",
    "wall_clock_ms",
]
