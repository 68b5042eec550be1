"""
Capability protocols - narrow interfaces to external collaborators.

The core never talks to a camera, a model or a canvas directly. Anything
that satisfies these protocols (YOLO adapters, OpenCV helpers, test fakes)
can be plugged into the detection loop and classification pipeline.
"""

from collections.abc import Sequence
from typing import Any, Protocol, Tuple, runtime_checkable

from .capture import LabelCandidate
from .detection import BoundingBox, Detection


@runtime_checkable
class DetectionCapability(Protocol):
    """Object detector. May raise; faults are absorbed per tick."""

    def detect(self, frame: Any) -> Sequence[Detection]:
        """
        Detect objects in a frame.

        Args:
            frame: Current video frame

        Returns:
            Detections in detector order
        """
        ...


@runtime_checkable
class ClassifierCapability(Protocol):
    """Image classifier selected by readiness. May raise; faults are absorbed."""

    @property
    def ready(self) -> bool:
        """True once the classifier can accept images."""
        ...

    def classify(self, image: Any) -> Sequence[LabelCandidate]:
        """
        Classify a still image.

        Args:
            image: Still image produced by the rasterizer

        Returns:
            Candidates ordered best-first (may be empty)
        """
        ...


class Rasterizer(Protocol):
    """Extracts a fixed-size still from a frame region."""

    def extract(self, frame: Any, bbox: BoundingBox, target_size: int) -> Any:
        ...


class AnnotationSink(Protocol):
    """Fire-and-forget drawing surface for detection overlays."""

    def begin_frame(self, frame: Any) -> None:
        """Start a fresh canvas for the given frame."""
        ...

    def draw(self, bbox: BoundingBox, label_text: str) -> None:
        ...

    def end_frame(self) -> None:
        """Finish the current canvas (all detections of the tick are drawn)."""
        ...


class FrameSource(Protocol):
    """Per-tick frame supply, shaped like ``cv2.VideoCapture.read``."""

    def read(self) -> Tuple[bool, Any]:
        ...
