"""Unit tests for the analysis file writer."""

from unittest.mock import patch

import pytest

from src.reports.analysis_writer import AnalysisFileWriter
from src.reports.exceptions import AnalysisWriteError
from src.reports.models import ReportKind
from src.reports.templates import MEMORY_ANALYSIS_TEMPLATE, PERFORMANCE_ANALYSIS_TEMPLATE


class TestAnalysisFileWriter:
    """Test AnalysisFileWriter functionality."""

    @pytest.mark.parametrize("kind,file_name,template", [
        (ReportKind.MEMORY, "memory_analysis.txt", MEMORY_ANALYSIS_TEMPLATE),
        (ReportKind.PERFORMANCE, "performance_analysis.txt", PERFORMANCE_ANALYSIS_TEMPLATE),
    ])
    def test_write_template(self, tmp_path, kind, file_name, template):
        """Test the template is written byte for byte to its well-known path."""
        path = AnalysisFileWriter.write(kind, tmp_path)

        assert path == tmp_path / file_name
        assert path.read_bytes() == template.encode("utf-8")

    def test_overwrites_previous_content(self, tmp_path):
        """Test earlier content is replaced, not appended to."""
        (tmp_path / "memory_analysis.txt").write_text("stale analysis\n" * 100)
        path = AnalysisFileWriter.write(ReportKind.MEMORY, tmp_path)
        assert path.read_text(encoding="utf-8") == MEMORY_ANALYSIS_TEMPLATE

    def test_output_is_identical_across_runs(self, tmp_path):
        """Test the document does not depend on when or where it is written."""
        (tmp_path / "first").mkdir()
        (tmp_path / "second").mkdir()
        first = AnalysisFileWriter.write(ReportKind.PERFORMANCE, tmp_path / "first")
        second = AnalysisFileWriter.write(ReportKind.PERFORMANCE, tmp_path / "second")
        assert first.read_bytes() == second.read_bytes()

    def test_templates_start_with_title(self):
        assert MEMORY_ANALYSIS_TEMPLATE.startswith("# LLM MODEL MEMORY ANALYSIS\n")
        assert PERFORMANCE_ANALYSIS_TEMPLATE.startswith("# LLM MODEL PERFORMANCE ANALYSIS\n")
        assert "Throughput Score**: Efficiency metric (tokens/sec ÷ CPU%)" in PERFORMANCE_ANALYSIS_TEMPLATE

    def test_missing_directory_raises(self, tmp_path):
        """Test a write failure is surfaced as AnalysisWriteError."""
        with pytest.raises(AnalysisWriteError) as exc_info:
            AnalysisFileWriter.write(ReportKind.MEMORY, tmp_path / "absent")

        assert exc_info.value.path == tmp_path / "absent" / "memory_analysis.txt"
        assert isinstance(exc_info.value.cause, OSError)

    def test_permission_error_raises(self, tmp_path):
        """Test OSError subclasses are wrapped too."""
        with patch('src.reports.analysis_writer.Path.write_text', side_effect=PermissionError("denied")):
            with pytest.raises(AnalysisWriteError, match="denied"):
                AnalysisFileWriter.write(ReportKind.PERFORMANCE, tmp_path)
