"""
Session state - everything one detection session mutates.

The counter, throttle, leaderboard and history are owned here and injected
into the pipeline, so sessions are isolated from each other.
"""

import logging
from collections.abc import Iterable, Sequence

from ..models import CaptureRecord, SessionObserver
from ..utils.constants import (
    BREED_CATALOG,
    DEFAULT_BUFFER_CAPACITY,
    DEFAULT_CAPTURE_COOLDOWN_MS,
)
from .capture_buffer import CaptureBuffer
from .label_mapper import LabelMapper
from .leaderboard import Leaderboard
from .throttle import CaptureThrottle

logger = logging.getLogger(__name__)


class SessionState:
    """
    Mutable state of a single session plus its observers.

    Attributes:
        mapper: Label to category mapping
        leaderboard: Category tally
        buffer: Bounded capture history
        throttle: Global capture cooldown gate
        capture_count: Capture attempts so far (incremented before classifying)
        observers: Presentation hooks notified of every change
    """

    def __init__(
        self,
        catalog: Sequence[str] = BREED_CATALOG,
        cooldown_ms: float = DEFAULT_CAPTURE_COOLDOWN_MS,
        buffer_capacity: int = DEFAULT_BUFFER_CAPACITY,
        observers: Iterable[SessionObserver] = (),
    ):
        self.mapper = LabelMapper(catalog)
        self.leaderboard = Leaderboard()
        self.buffer = CaptureBuffer(buffer_capacity)
        self.throttle = CaptureThrottle(cooldown_ms)
        self.capture_count = 0
        self.observers: list[SessionObserver] = list(observers)

    def add_observer(self, observer: SessionObserver) -> None:
        self.observers.append(observer)

    def _notify(self, hook: str, payload) -> None:
        """Call ``hook`` on every observer; a failing observer is logged and skipped."""
        for observer in self.observers:
            try:
                getattr(observer, hook)(payload)
            except Exception as e:
                logger.error(
                    f"Observer {type(observer).__name__}.{hook} failed: {e}",
                    exc_info=True,
                )

    def count_capture(self) -> int:
        """Increment the global capture counter and notify observers."""
        self.capture_count += 1
        self._notify("on_global_count_changed", self.capture_count)
        return self.capture_count

    def record_category(self, category: str) -> None:
        """Tally a category and publish the new ranking."""
        if not self.leaderboard.record(category):
            return
        self._notify("on_leaderboard_changed", self.leaderboard.ranked_view())

    def store_capture(self, record: CaptureRecord) -> None:
        """Append to history and publish the record."""
        self.buffer.append(record)
        self._notify("on_capture_recorded", record)
