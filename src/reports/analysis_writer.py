"""Writes the static analysis document next to a report."""
import logging
from pathlib import Path
from typing import Union

from src.const import MEMORY_ANALYSIS_FILE_NAME, PERFORMANCE_ANALYSIS_FILE_NAME
from .exceptions import AnalysisWriteError
from .models import ReportKind
from .templates import MEMORY_ANALYSIS_TEMPLATE, PERFORMANCE_ANALYSIS_TEMPLATE


# Configure logging
logger = logging.getLogger(__name__)


class AnalysisFileWriter:
    """Writes the fixed analysis template for a report kind."""

    FILE_NAMES = {
        ReportKind.MEMORY: MEMORY_ANALYSIS_FILE_NAME,
        ReportKind.PERFORMANCE: PERFORMANCE_ANALYSIS_FILE_NAME,
    }
    TEMPLATES = {
        ReportKind.MEMORY: MEMORY_ANALYSIS_TEMPLATE,
        ReportKind.PERFORMANCE: PERFORMANCE_ANALYSIS_TEMPLATE,
    }

    @staticmethod
    def output_path(kind: ReportKind, reports_dir: Union[Path, str]) -> Path:
        return Path(reports_dir) / AnalysisFileWriter.FILE_NAMES[kind]

    @staticmethod
    def write(kind: ReportKind, reports_dir: Union[Path, str]) -> Path:
        """
        Write the analysis file, replacing any previous content.

        Args:
            kind: Which report's analysis to write.
            reports_dir: Session report directory.

        Returns:
            Path of the written file.

        Raises:
            AnalysisWriteError: If the file cannot be written.
        """
        output_path = AnalysisFileWriter.output_path(kind, reports_dir)
        try:
            output_path.write_text(AnalysisFileWriter.TEMPLATES[kind], encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write analysis file {output_path}: {e}")
            raise AnalysisWriteError(output_path, e) from e

        logger.info(f"Analysis saved: {output_path}")
        return output_path
