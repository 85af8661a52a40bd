"""Unit tests for leaderboard extraction."""

from src.reports.leaderboard import LeaderboardExtractor
from src.reports.models import BenchmarkRow, LeaderboardColumn


class TestLeaderboardExtractor:
    """Test LeaderboardExtractor functionality."""

    def test_empty_rows_returns_none(self):
        """Test an empty row set has no leader."""
        assert LeaderboardExtractor.top([], LeaderboardColumn.TOKENS_PER_SEC) is None
        assert LeaderboardExtractor.fastest([]) is None
        assert LeaderboardExtractor.most_efficient([]) is None

    def test_highest_value_wins(self, sample_rows):
        """Test the row with the largest value is returned."""
        assert LeaderboardExtractor.fastest(sample_rows).model_name == "mistral-7b-q4"
        assert LeaderboardExtractor.most_efficient(sample_rows).model_name == "mistral-7b-q4"

    def test_unavailable_never_wins(self):
        """Test a numeric row beats an unavailable one without raising."""
        rows = [
            BenchmarkRow("first", tokens_per_sec=10.5),
            BenchmarkRow("second", tokens_per_sec=None),
        ]
        assert LeaderboardExtractor.fastest(rows) is rows[0]

    def test_unavailable_first_loses_to_later_number(self):
        """Test an unavailable first row is replaced by any numeric row."""
        rows = [
            BenchmarkRow("unmeasured", tokens_per_sec=None),
            BenchmarkRow("slow", tokens_per_sec=0.0),
        ]
        assert LeaderboardExtractor.fastest(rows) is rows[1]

    def test_all_unavailable_returns_first_row(self):
        """Test the first row leads when nothing was measured."""
        rows = [BenchmarkRow("a"), BenchmarkRow("b")]
        assert LeaderboardExtractor.most_efficient(rows) is rows[0]

    def test_ties_keep_first_row(self):
        """Test equal maxima resolve to the earliest row."""
        rows = [
            BenchmarkRow("low", throughput_score=0.1),
            BenchmarkRow("tie-first", throughput_score=0.5),
            BenchmarkRow("tie-second", throughput_score=0.5),
        ]
        assert LeaderboardExtractor.most_efficient(rows) is rows[1]

    def test_column_selection(self):
        """Test each column ranks independently."""
        rows = [
            BenchmarkRow("fast", tokens_per_sec=50.0, throughput_score=0.2),
            BenchmarkRow("efficient", tokens_per_sec=20.0, throughput_score=0.9),
        ]
        assert LeaderboardExtractor.top(rows, LeaderboardColumn.TOKENS_PER_SEC).model_name == "fast"
        assert LeaderboardExtractor.top(rows, LeaderboardColumn.THROUGHPUT_SCORE).model_name == "efficient"
