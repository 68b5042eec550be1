"""
Leaderboard - category occurrence tally with a ranked view.
"""

from ..models import LeaderboardEntry


class Leaderboard:
    """
    Counts successful classifications per category.

    Categories appear only once first recorded and counts never decrease.
    Ranking is by count descending; ties keep first-recorded order because
    the sort is stable over insertion-ordered storage.
    """

    def __init__(self):
        self._counts: dict[str, int] = {}

    def record(self, category: str | None) -> bool:
        """
        Increment a category's count.

        Returns:
            True if the tally changed, False for an empty category
        """
        if not category:
            return False
        self._counts[category] = self._counts.get(category, 0) + 1
        return True

    def count(self, category: str) -> int:
        return self._counts.get(category, 0)

    def ranked_view(self) -> list[LeaderboardEntry]:
        """Fresh snapshot sorted by count descending."""
        ranked = sorted(self._counts.items(), key=lambda item: item[1], reverse=True)
        return [LeaderboardEntry(category=c, count=n) for c, n in ranked]

    def __len__(self) -> int:
        return len(self._counts)
