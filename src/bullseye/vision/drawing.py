"""
OpenCV drawing helpers - region extraction and detection overlays.
"""

import logging
import os

import cv2
import numpy as np

from ..models import BoundingBox
from ..utils.constants import DEFAULT_SNAPSHOT_INTERVAL, SNAPSHOT_FILENAME

logger = logging.getLogger(__name__)

BOX_COLOR = (255, 212, 0)  # BGR
TEXT_COLOR = (20, 20, 20)
LABEL_HEIGHT = 22


class CropRasterizer:
    """Crops a bounding box out of a frame and scales it to a square still."""

    def extract(self, frame: np.ndarray, bbox: BoundingBox, target_size: int) -> np.ndarray:
        """
        Extract a ``target_size`` x ``target_size`` still from ``bbox``.

        The box is clipped to the frame. A box with no overlap yields a
        black still rather than an error.
        """
        frame_height, frame_width = frame.shape[:2]
        x1 = max(0, int(bbox.x))
        y1 = max(0, int(bbox.y))
        x2 = min(frame_width, int(bbox.x + bbox.width))
        y2 = min(frame_height, int(bbox.y + bbox.height))

        channels = frame.shape[2:]
        if x2 <= x1 or y2 <= y1:
            return np.zeros((target_size, target_size, *channels), dtype=frame.dtype)

        region = frame[y1:y2, x1:x2]
        return cv2.resize(region, (target_size, target_size), interpolation=cv2.INTER_AREA)


class FrameAnnotator:
    """
    Draws detection boxes and labels onto a copy of the current frame.

    ``canvas`` holds the annotated copy of the most recent frame. With a
    ``snapshot_dir`` the canvas is written to ``latest.jpg`` there every
    ``snapshot_interval`` frames.
    """

    def __init__(
        self,
        snapshot_dir: str | None = None,
        snapshot_interval: int = DEFAULT_SNAPSHOT_INTERVAL,
    ):
        self.canvas: np.ndarray | None = None
        self.snapshot_dir = snapshot_dir
        self.snapshot_interval = max(1, snapshot_interval)
        self.frame_count = 0
        if snapshot_dir:
            os.makedirs(snapshot_dir, exist_ok=True)
            logger.info(f"Snapshots: {self.snapshot_path}")

    @property
    def snapshot_path(self) -> str | None:
        if not self.snapshot_dir:
            return None
        return os.path.join(self.snapshot_dir, SNAPSHOT_FILENAME)

    def begin_frame(self, frame: np.ndarray) -> None:
        self.canvas = frame.copy()

    def draw(self, bbox: BoundingBox, label_text: str) -> None:
        if self.canvas is None:
            logger.debug("Annotation skipped - no frame started")
            return

        x, y = int(bbox.x), int(bbox.y)
        x2, y2 = int(bbox.x + bbox.width), int(bbox.y + bbox.height)
        cv2.rectangle(self.canvas, (x, y), (x2, y2), BOX_COLOR, 2)

        (text_width, _), _ = cv2.getTextSize(label_text, cv2.FONT_HERSHEY_SIMPLEX, 0.5, 1)
        label_top = max(0, y - LABEL_HEIGHT)
        cv2.rectangle(
            self.canvas,
            (x, label_top),
            (x + text_width + 12, label_top + LABEL_HEIGHT),
            BOX_COLOR,
            cv2.FILLED,
        )
        cv2.putText(
            self.canvas,
            label_text,
            (x + 6, label_top + 16),
            cv2.FONT_HERSHEY_SIMPLEX,
            0.5,
            TEXT_COLOR,
            1,
        )

    def end_frame(self) -> None:
        self.frame_count += 1
        if self.snapshot_dir and self.frame_count % self.snapshot_interval == 0:
            self.save_snapshot()

    def save_snapshot(self) -> bool:
        """
        Write the current canvas to ``latest.jpg``.

        Written to a temp file first and swapped in, so readers never see
        a partial image.

        Returns:
            True if the snapshot was written
        """
        if self.canvas is None or not self.snapshot_dir:
            return False

        tmp_path = os.path.join(self.snapshot_dir, f".{SNAPSHOT_FILENAME}")
        try:
            if not cv2.imwrite(tmp_path, self.canvas, [cv2.IMWRITE_JPEG_QUALITY, 85]):
                logger.warning(f"Failed to encode snapshot: {tmp_path}")
                return False
            os.replace(tmp_path, self.snapshot_path)
            return True
        except (OSError, cv2.error) as e:
            logger.warning(f"Error saving snapshot: {e}")
            return False
