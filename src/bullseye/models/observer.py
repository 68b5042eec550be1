"""
SessionObserver Protocol - presentation-layer hooks.

Observers receive every capture, every leaderboard change and every
global-count change. Rendering (console, UI, web) lives behind this
interface; the core only emits.
"""

from collections.abc import Sequence
from typing import Protocol

from .capture import CaptureRecord, LeaderboardEntry


class SessionObserver(Protocol):
    """
    Protocol for session event consumers.

    Example:
        session = SessionState(catalog, observers=[ConsoleReporter()])
    """

    def on_capture_recorded(self, record: CaptureRecord) -> None:
        """Called once per completed classification, whatever the outcome."""
        ...

    def on_leaderboard_changed(self, ranked: Sequence[LeaderboardEntry]) -> None:
        """Called after every leaderboard mutation with a fresh ranked snapshot."""
        ...

    def on_global_count_changed(self, count: int) -> None:
        """Called on every capture attempt."""
        ...
