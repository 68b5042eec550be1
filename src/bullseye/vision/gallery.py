"""
Capture gallery - writes each capture's still to disk.

The gallery mirrors the in-memory history: at most ``capacity`` stills are
kept and the oldest file is removed when a new one arrives. Stills left
over from a previous session are cleared on startup.
"""

import glob
import logging
import os
import re
from collections import deque
from collections.abc import Sequence

import cv2
import numpy as np

from ..models import CaptureRecord, LeaderboardEntry
from ..utils.constants import DEFAULT_BUFFER_CAPACITY
from ..utils.formatting import percent

logger = logging.getLogger(__name__)

GALLERY_PATTERN = "capture_*.jpg"


def _slug(category: str) -> str:
    return re.sub(r"[^A-Za-z0-9]+", "_", category).strip("_").lower() or "capture"


class GalleryWriter:
    """
    SessionObserver that persists capture stills as JPEG files.

    Attributes:
        output_dir: Directory holding the stills
        capacity: Maximum number of stills kept
        saved: Paths of the kept stills, oldest first
    """

    def __init__(self, output_dir: str, capacity: int = DEFAULT_BUFFER_CAPACITY):
        self.output_dir = output_dir
        self.capacity = capacity
        self.saved: deque[str] = deque()

        os.makedirs(output_dir, exist_ok=True)
        for stale in glob.glob(os.path.join(output_dir, GALLERY_PATTERN)):
            try:
                os.remove(stale)
            except OSError as e:
                logger.debug(f"Error removing old capture {stale}: {e}")
        logger.info(f"Capture gallery: {output_dir} (last {capacity})")

    def filename_for(self, record: CaptureRecord) -> str:
        """e.g. ``capture_000012_holstein_friesian_92.jpg``"""
        return (
            f"capture_{record.capture_number:06d}_{_slug(record.category)}"
            f"_{percent(record.confidence)}.jpg"
        )

    def on_capture_recorded(self, record: CaptureRecord) -> None:
        if not isinstance(record.image, np.ndarray):
            logger.debug("Capture has no image data - not saved")
            return

        path = os.path.join(self.output_dir, self.filename_for(record))
        if not cv2.imwrite(path, record.image):
            logger.warning(f"Failed to write capture: {path}")
            return

        self.saved.append(path)
        while len(self.saved) > self.capacity:
            oldest = self.saved.popleft()
            try:
                os.remove(oldest)
            except OSError as e:
                logger.warning(f"Failed to delete capture: {e}")

    def on_leaderboard_changed(self, ranked: Sequence[LeaderboardEntry]) -> None:
        pass

    def on_global_count_changed(self, count: int) -> None:
        pass
