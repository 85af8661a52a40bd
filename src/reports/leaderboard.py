"""Picks the best row of a summary by one metric."""
import logging
from typing import List, Optional

from .models import BenchmarkRow, LeaderboardColumn


# Configure logging
logger = logging.getLogger(__name__)


class LeaderboardExtractor:
    """Finds the leading row for a summary column."""

    @staticmethod
    def top(rows: List[BenchmarkRow], column: LeaderboardColumn) -> Optional[BenchmarkRow]:
        """
        Return the row with the highest value in a column.

        Unavailable values rank below every number. On ties the earliest row wins.

        Args:
            rows: Summary rows in input order.
            column: Column to rank by.

        Returns:
            The leading row, or None if there are no rows.
        """
        best = None
        best_value = None
        for row in rows:
            value = row.metric(column)
            if best is None:
                best, best_value = row, value
            elif value is not None and (best_value is None or value > best_value):
                best, best_value = row, value

        if best is None:
            logger.debug(f"No rows to rank by {column.value}")
        return best

    @staticmethod
    def fastest(rows: List[BenchmarkRow]) -> Optional[BenchmarkRow]:
        return LeaderboardExtractor.top(rows, LeaderboardColumn.TOKENS_PER_SEC)

    @staticmethod
    def most_efficient(rows: List[BenchmarkRow]) -> Optional[BenchmarkRow]:
        return LeaderboardExtractor.top(rows, LeaderboardColumn.THROUGHPUT_SCORE)
