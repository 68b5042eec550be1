"""
Capture throttle - one global cooldown gate for all detections.
"""

from ..utils.constants import DEFAULT_CAPTURE_COOLDOWN_MS


class CaptureThrottle:
    """
    Cooldown gate shared by every detection in the session.

    Attributes:
        cooldown_ms: Minimum gap between two captures, in milliseconds
        last_capture_ms: Timestamp of the last granted capture, None before the first
    """

    def __init__(self, cooldown_ms: float = DEFAULT_CAPTURE_COOLDOWN_MS):
        self.cooldown_ms = cooldown_ms
        self.last_capture_ms: float | None = None

    def try_acquire(self, now_ms: float) -> bool:
        """
        Grant a capture if the cooldown has strictly elapsed.

        Check and update happen together; a refused call changes nothing.
        """
        if (
            self.last_capture_ms is not None
            and now_ms - self.last_capture_ms <= self.cooldown_ms
        ):
            return False
        self.last_capture_ms = now_ms
        return True
