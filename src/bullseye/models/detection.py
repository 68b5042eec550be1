"""
Data models for per-frame detections
"""

from dataclasses import dataclass
from typing import Tuple

from ..utils.formatting import percent


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned box in frame pixels.

    Attributes:
        x: Left edge
        y: Top edge
        width: Box width
        height: Box height
    """

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_xyxy(cls, x1: float, y1: float, x2: float, y2: float) -> "BoundingBox":
        """Build a box from corner coordinates."""
        return cls(x=x1, y=y1, width=x2 - x1, height=y2 - y1)

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class Detection:
    """
    A single detector hit. Produced per frame, never retained.

    Attributes:
        object_class: Detector class name (e.g. "cow")
        score: Detector confidence in [0, 1]
        bbox: Bounding box in frame pixels
    """

    object_class: str
    score: float
    bbox: BoundingBox

    def label_text(self) -> str:
        """Annotation text, e.g. ``cow (75%)``."""
        return f"{self.object_class} ({percent(self.score)}%)"
