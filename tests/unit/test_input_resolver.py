"""Unit tests for input resolution."""

import pytest

from src.reports.exceptions import MissingSummaryFile
from src.reports.input_resolver import InputResolver
from tests.helpers import write_summary
from tests.test_const import MISSING_SESSION, OTHER_SESSION, ROW_MIXTRAL, SAMPLE_SESSION, TEST_SESSION


class TestInputResolver:
    """Test InputResolver functionality."""

    def test_sample_context(self, reports_dir):
        """Test the sample sentinel resolves to the bundled sample summary."""
        context = InputResolver(reports_dir).context_for(SAMPLE_SESSION)

        assert context.is_sample
        assert context.reports_dir == reports_dir
        assert context.summary_path == reports_dir / "sample" / "sample_summary.csv"
        assert context.hardware_path == reports_dir / "hardware_info.txt"

    def test_session_context(self, reports_dir):
        """Test a session resolves to its own directory."""
        context = InputResolver(reports_dir).context_for(TEST_SESSION)

        assert not context.is_sample
        assert context.reports_dir == reports_dir / TEST_SESSION
        assert context.summary_path == reports_dir / TEST_SESSION / "summary.csv"
        assert context.hardware_path == reports_dir / TEST_SESSION / "hardware_info.txt"

    def test_resolve_existing_session(self, reports_dir):
        """Test resolving a session whose summary exists."""
        write_summary(reports_dir / TEST_SESSION / "summary.csv", ROW_MIXTRAL)
        context = InputResolver(reports_dir).resolve(TEST_SESSION)
        assert context.summary_path.is_file()

    def test_resolve_creates_directory_but_not_summary(self, reports_dir):
        """Test the session directory is created even when the summary is missing."""
        with pytest.raises(MissingSummaryFile):
            InputResolver(reports_dir).resolve(MISSING_SESSION)

        assert (reports_dir / MISSING_SESSION).is_dir()
        assert not (reports_dir / MISSING_SESSION / "summary.csv").exists()

    def test_missing_session_lists_candidates(self, reports_dir):
        """Test only timestamp-named entries are offered as sessions."""
        (reports_dir / OTHER_SESSION).mkdir()
        (reports_dir / TEST_SESSION).mkdir()
        (reports_dir / "sample").mkdir()
        (reports_dir / "notes.txt").write_text("")

        with pytest.raises(MissingSummaryFile) as exc_info:
            InputResolver(reports_dir).resolve("2024-13-99")

        assert exc_info.value.candidates == [TEST_SESSION, OTHER_SESSION]
        assert exc_info.value.session == "2024-13-99"

    def test_missing_session_not_offered_as_candidate(self, reports_dir):
        """Test the directory created for the missing session is not listed."""
        with pytest.raises(MissingSummaryFile) as exc_info:
            InputResolver(reports_dir).resolve(MISSING_SESSION)

        assert exc_info.value.candidates == []

    def test_missing_sample_has_no_candidates(self, reports_dir):
        """Test sample data never triggers a session listing."""
        (reports_dir / TEST_SESSION).mkdir()
        with pytest.raises(MissingSummaryFile) as exc_info:
            InputResolver(reports_dir).resolve(SAMPLE_SESSION)

        assert exc_info.value.candidates is None
        assert str(exc_info.value) == f"Error: {reports_dir / 'sample' / 'sample_summary.csv'} not found."

    def test_list_sessions_without_base_dir(self, tmp_path):
        """Test listing sessions of a base directory that does not exist."""
        assert InputResolver(tmp_path / "absent").list_sessions() == []
