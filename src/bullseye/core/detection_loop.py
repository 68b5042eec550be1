"""
Detection loop - per-tick detection, annotation and throttled capture.

Each tick: detect, keep detections of the target class scoring strictly
above the threshold, annotate them in encounter order and offer each one
to the capture throttle. The first detection to win the throttle is
captured; the rest of that tick's detections are annotated only.
Detection faults are logged and the loop moves on to the next tick.
"""

import logging
import time
from collections.abc import Callable
from enum import Enum
from threading import Event
from typing import Any

from ..models import AnnotationSink, Detection, DetectionCapability, FrameSource
from ..utils.constants import (
    DEFAULT_CONFIDENCE_THRESHOLD,
    DEFAULT_TARGET_CLASS,
    STATUS_REPORT_INTERVAL,
)
from .pipeline import ClassificationPipeline

logger = logging.getLogger(__name__)


def wall_clock_ms() -> float:
    """Milliseconds since the epoch."""
    return time.time() * 1000


class LoopState(Enum):
    INITIALIZING = "initializing"
    RUNNING = "running"
    ERROR = "error"


class DetectionLoop:
    """
    Drives detection and capture over a stream of frames.

    Args:
        detector: Detection capability queried once per tick
        pipeline: Classification pipeline invoked for granted captures
        annotator: Optional sink for detection overlays
        target_class: Detector class to keep
        confidence_threshold: Detections must score strictly above this
        clock: Millisecond clock used for the throttle
    """

    def __init__(
        self,
        detector: DetectionCapability,
        pipeline: ClassificationPipeline,
        annotator: AnnotationSink | None = None,
        target_class: str = DEFAULT_TARGET_CLASS,
        confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
        clock: Callable[[], float] = wall_clock_ms,
    ):
        self.detector = detector
        self.pipeline = pipeline
        self.annotator = annotator
        self.target_class = target_class
        self.confidence_threshold = confidence_threshold
        self.clock = clock

        self.state = LoopState.INITIALIZING
        self.tick_count = 0
        self.detection_count = 0
        self.fault_count = 0

    @property
    def session(self):
        return self.pipeline.session

    def qualifies(self, detection: Detection) -> bool:
        return (
            detection.object_class == self.target_class
            and detection.score > self.confidence_threshold
        )

    def tick(self, frame: Any) -> int:
        """
        Run one scheduled tick.

        Args:
            frame: Current video frame

        Returns:
            Number of captures triggered (0 or 1)
        """
        self.tick_count += 1

        try:
            detections = self.detector.detect(frame)
        except Exception as e:
            self.state = LoopState.ERROR
            self.fault_count += 1
            logger.error(f"Detection error: {e}", exc_info=True)
            return 0

        self.state = LoopState.RUNNING
        qualifying = [d for d in detections if self.qualifies(d)]
        self.detection_count += len(qualifying)

        if self.annotator is not None:
            self.annotator.begin_frame(frame)

        captures = 0
        for detection in qualifying:
            if self.annotator is not None:
                self.annotator.draw(detection.bbox, detection.label_text())

            now = self.clock()
            if self.session.throttle.try_acquire(now):
                self.pipeline.classify(
                    frame, detection.bbox, detection.score, timestamp=now
                )
                captures += 1

        if self.annotator is not None:
            self.annotator.end_frame()

        return captures

    def run(
        self,
        frames: FrameSource,
        shutdown_event: Event | None = None,
        max_ticks: int | None = None,
        duration_seconds: float | None = None,
    ) -> None:
        """
        Tick until the frame source is exhausted or the run is withdrawn.

        Args:
            frames: Frame source read once per tick
            shutdown_event: Event to signal graceful shutdown
            max_ticks: Optional tick budget
            duration_seconds: Optional wall-clock budget
        """
        start_time = time.time()
        ticks = 0
        captures = 0
        logger.info(
            f"Detection started (target={self.target_class}, "
            f"threshold>{self.confidence_threshold})"
        )

        try:
            while True:
                if shutdown_event is not None and shutdown_event.is_set():
                    logger.info("Shutdown signal received")
                    break
                if max_ticks is not None and ticks >= max_ticks:
                    break
                if (
                    duration_seconds is not None
                    and time.time() - start_time >= duration_seconds
                ):
                    logger.info("Run duration reached")
                    break

                ret, frame = frames.read()
                if not ret:
                    logger.warning("Failed to read frame")
                    break

                captures += self.tick(frame)
                ticks += 1

                if ticks % STATUS_REPORT_INTERVAL == 0:
                    self._log_status(start_time, captures)

        except KeyboardInterrupt:
            logger.info("Detection stopped by user")
        finally:
            self._log_final_stats(start_time, captures)

    def _log_status(self, start_time: float, captures: int) -> None:
        elapsed = time.time() - start_time
        fps = self.tick_count / elapsed if elapsed > 0 else 0
        logger.info(
            f"[{elapsed / 60:.1f}min] Tick {self.tick_count} | FPS: {fps:.1f} | "
            f"Detections: {self.detection_count} | Captures: {captures}"
        )

    def _log_final_stats(self, start_time: float, captures: int) -> None:
        elapsed = time.time() - start_time
        logger.info("Detection complete")
        logger.info(f"Runtime: {elapsed / 60:.1f} minutes")
        logger.info(f"Ticks: {self.tick_count}")
        logger.info(f"Detections: {self.detection_count}")
        logger.info(f"Captures: {captures}")
        if self.fault_count:
            logger.warning(f"Detection faults: {self.fault_count}")
