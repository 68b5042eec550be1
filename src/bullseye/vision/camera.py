"""
Camera initialization and management.
"""

import logging
import time

import cv2

from ..utils.constants import CAMERA_RECONNECT_DELAY, MAX_CAMERA_RECONNECT_ATTEMPTS

logger = logging.getLogger(__name__)


def _parse_source(camera_url: str) -> str | int:
    """Numeric strings select a local device index."""
    return int(camera_url) if camera_url.isdigit() else camera_url


def initialize_camera(camera_url: str) -> cv2.VideoCapture:
    """
    Initialize camera with retry logic.

    Args:
        camera_url: Camera URL, device path or device index

    Returns:
        OpenCV VideoCapture object (usable as a frame source)

    Raises:
        RuntimeError: If camera cannot be opened after retries
    """
    source = _parse_source(camera_url)
    for attempt in range(MAX_CAMERA_RECONNECT_ATTEMPTS + 1):
        logger.info(f"Connecting to camera: {camera_url} (attempt {attempt + 1})")
        cap = cv2.VideoCapture(source)

        if cap.isOpened():
            logger.info("Camera connected successfully")
            return cap

        if attempt < MAX_CAMERA_RECONNECT_ATTEMPTS:
            logger.warning(
                f"Failed to connect, retrying in {CAMERA_RECONNECT_DELAY}s..."
            )
            time.sleep(CAMERA_RECONNECT_DELAY)

    logger.error(
        f"Failed to connect to camera after {MAX_CAMERA_RECONNECT_ATTEMPTS + 1} attempts"
    )
    raise RuntimeError(f"Cannot connect to camera: {camera_url}")
