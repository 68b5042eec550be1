"""
Consolidated data models for bullseye.

This package contains the core data structures and the capability
protocols the core consumes.
"""

from .capabilities import (
    AnnotationSink,
    ClassifierCapability,
    DetectionCapability,
    FrameSource,
    Rasterizer,
)
from .capture import CaptureRecord, LabelCandidate, LeaderboardEntry
from .detection import BoundingBox, Detection
from .observer import SessionObserver

__all__ = [
    # Protocols
    "AnnotationSink",
    # Detection models
    "BoundingBox",
    # Capture models
    "CaptureRecord",
    "ClassifierCapability",
    "Detection",
    "DetectionCapability",
    "FrameSource",
    "LabelCandidate",
    "LeaderboardEntry",
    "Rasterizer",
    "SessionObserver",
]
