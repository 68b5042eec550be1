"""
Console reporting - a SessionObserver that logs captures and rankings.
"""

import logging
from collections.abc import Sequence

from .models import CaptureRecord, LeaderboardEntry
from .utils.formatting import percent

logger = logging.getLogger(__name__)


class ConsoleReporter:
    """
    Logs session activity and keeps the latest snapshot for a final summary.

    Attributes:
        total_captures: Last global count seen
        ranking: Last ranked leaderboard seen
        recent: Category of the last capture seen
    """

    def __init__(self, leaderboard_size: int = 5):
        self.leaderboard_size = leaderboard_size
        self.total_captures = 0
        self.ranking: list[LeaderboardEntry] = []
        self.recent: str | None = None

    def on_capture_recorded(self, record: CaptureRecord) -> None:
        self.recent = record.category
        logger.info(
            f"Captured: {record.category} ({percent(record.confidence)}%)"
        )

    def on_leaderboard_changed(self, ranked: Sequence[LeaderboardEntry]) -> None:
        self.ranking = list(ranked)
        top = ", ".join(
            f"{e.category}={e.count}" for e in self.ranking[: self.leaderboard_size]
        )
        logger.info(f"Leaderboard: {top}")

    def on_global_count_changed(self, count: int) -> None:
        self.total_captures = count
        logger.debug(f"Cows detected: {count}")

    def render_summary(self) -> str:
        """Multi-line leaderboard summary for the end of a run."""
        lines = ["=" * 70, "LEADERBOARD", "=" * 70]
        if not self.ranking:
            lines.append("  No breeds classified")
        for position, entry in enumerate(self.ranking, 1):
            lines.append(f"  {position:>2}. {entry.category:<24} {entry.count:>5}x")
        lines.append(f"\nTotal captures: {self.total_captures}")
        lines.append("=" * 70)
        return "\n".join(lines)
