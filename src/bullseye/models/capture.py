"""
Data models for classification results and aggregated history
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LabelCandidate:
    """One classifier candidate, best-first within a result."""

    label: str
    probability: float | None = None


@dataclass(frozen=True)
class CaptureRecord:
    """
    Outcome of one capture.

    Attributes:
        image: Still image extracted from the detection (opaque to the core)
        category: Catalog category, or a sentinel when no category was produced
        confidence: Classifier probability, or the detection score for sentinels
        timestamp: Clock reading (milliseconds) when the capture was taken
        capture_number: Value of the global capture counter for this capture
    """

    image: Any
    category: str
    confidence: float
    timestamp: float
    capture_number: int = 0


@dataclass(frozen=True)
class LeaderboardEntry:
    """Category with its occurrence count (always >= 1)."""

    category: str
    count: int
