"""
Capture buffer - bounded visual history with FIFO eviction.
"""

import logging

from ..models import CaptureRecord
from ..utils.constants import DEFAULT_BUFFER_CAPACITY

logger = logging.getLogger(__name__)


class CaptureBuffer:
    """Keeps the most recent captures, oldest first."""

    def __init__(self, capacity: int = DEFAULT_BUFFER_CAPACITY):
        if capacity < 1:
            raise ValueError(f"Capture buffer capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._records: list[CaptureRecord] = []

    def append(self, record: CaptureRecord) -> list[CaptureRecord]:
        """
        Add a record at the end, evicting from the front past capacity.

        Args:
            record: Capture to keep

        Returns:
            Records evicted by this append (oldest first)
        """
        self._records.append(record)
        evicted = []
        while len(self._records) > self.capacity:
            evicted.append(self._records.pop(0))
        if evicted:
            logger.debug(f"Evicted {len(evicted)} capture(s) from history")
        return evicted

    def contents(self) -> list[CaptureRecord]:
        """Current records, oldest first (a copy)."""
        return list(self._records)

    def __len__(self) -> int:
        return len(self._records)
