"""
Classification pipeline - turns a captured region into a CaptureRecord.

Classifier selection is by readiness: primary, else fallback, else none.
Every outcome produces a record; only a real mapped category reaches the
leaderboard. Classification faults are absorbed here and never reach the
detection loop.
"""

import logging
from collections.abc import Callable
from typing import Any

from ..models import (
    BoundingBox,
    CaptureRecord,
    ClassifierCapability,
    Rasterizer,
)
from ..utils.constants import (
    DEFAULT_INPUT_SIZE,
    SENTINEL_NO_CLASSIFIER,
    SENTINEL_PREDICTION_ERROR,
    SENTINEL_UNKNOWN,
    UNLABELED_CANDIDATE,
)
from ..utils.formatting import percent
from .session import SessionState

logger = logging.getLogger(__name__)


class ClassificationPipeline:
    """
    Captures a detection region and classifies it into a catalog category.

    Args:
        session: Session state receiving counts, tallies and records
        rasterizer: Extracts the still image from the frame
        primary: Preferred classifier (used when ready)
        fallback: Classifier used when the primary is not ready
        clock: Millisecond clock used to timestamp records
        input_size: Side of the square still passed to classifiers
    """

    def __init__(
        self,
        session: SessionState,
        rasterizer: Rasterizer,
        primary: ClassifierCapability | None = None,
        fallback: ClassifierCapability | None = None,
        clock: Callable[[], float] | None = None,
        input_size: int = DEFAULT_INPUT_SIZE,
    ):
        self.session = session
        self.rasterizer = rasterizer
        self.primary = primary
        self.fallback = fallback
        self.clock = clock
        self.input_size = input_size

    def select_classifier(self) -> ClassifierCapability | None:
        """Return the first ready classifier, never both."""
        if self.primary is not None and self.primary.ready:
            return self.primary
        if self.fallback is not None and self.fallback.ready:
            return self.fallback
        return None

    def classify(
        self,
        frame: Any,
        bbox: BoundingBox,
        detection_score: float,
        timestamp: float | None = None,
    ) -> CaptureRecord:
        """
        Capture and classify one detection region.

        Args:
            frame: Frame the detection came from
            bbox: Detection bounding box
            detection_score: Detector confidence, used when no probability exists
            timestamp: Capture time in milliseconds (defaults to the clock)

        Returns:
            The CaptureRecord appended to history
        """
        capture_number = self.session.count_capture()
        if timestamp is None:
            timestamp = self.clock() if self.clock is not None else 0.0

        image = self.rasterizer.extract(frame, bbox, self.input_size)
        category, confidence = self._categorize(image, detection_score)

        record = CaptureRecord(
            image=image,
            category=category,
            confidence=confidence,
            timestamp=timestamp,
            capture_number=capture_number,
        )
        self.session.store_capture(record)
        logger.info(
            f"Capture #{capture_number}: {category} ({percent(confidence)}%)"
        )
        return record

    def _categorize(self, image: Any, detection_score: float) -> tuple[str, float]:
        """Run the selected classifier and resolve a (category, confidence) pair."""
        classifier = self.select_classifier()
        if classifier is None:
            logger.debug("No classifier ready - recording detection only")
            return SENTINEL_NO_CLASSIFIER, detection_score

        try:
            candidates = classifier.classify(image)
        except Exception as e:
            logger.error(f"Prediction failed: {e}", exc_info=True)
            return SENTINEL_PREDICTION_ERROR, detection_score

        if not candidates:
            return SENTINEL_UNKNOWN, detection_score

        top = candidates[0]
        label = top.label or UNLABELED_CANDIDATE
        category = self.session.mapper.map(label)
        confidence = top.probability or detection_score or 0
        logger.debug(f"Top label '{label}' -> {category}")

        self.session.record_category(category)
        return category, confidence
