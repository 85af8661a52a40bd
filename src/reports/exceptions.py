"""Custom exceptions for the benchmark reports."""
from pathlib import Path
from typing import List, Optional


class ReportError(Exception):
    """Base exception for report generation failures."""
    pass


class MissingSummaryFile(ReportError):
    """Exception raised when the resolved summary table does not exist."""

    def __init__(self, summary_path: Path, session: str, candidates: Optional[List[str]] = None):
        super().__init__(f"Error: {summary_path} not found.")
        self.summary_path = summary_path
        self.session = session
        # None when no session listing applies (sample data requested)
        self.candidates = candidates


class SummaryFormatError(ReportError):
    """Exception raised when the summary table does not have the expected layout."""
    pass


class AnalysisWriteError(ReportError):
    """Exception raised when the analysis file cannot be written."""

    def __init__(self, path: Path, cause: Exception):
        super().__init__(f"Could not write analysis file {path}: {cause}")
        self.path = path
        self.cause = cause
