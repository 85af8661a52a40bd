"""Report runner to orchestrate one report generation."""
from typing import List, Optional
import logging

from rich.console import Console

from src.const import EXIT_ANALYSIS_WRITE_FAILED, EXIT_MISSING_SUMMARY, EXIT_SUCCESS
from src.shared.config import Config

from .analysis_writer import AnalysisFileWriter
from .exceptions import AnalysisWriteError, MissingSummaryFile, SummaryFormatError
from .hardware import HardwareInfoLoader
from .input_resolver import InputResolver
from .models import ReportKind
from .renderer import RENDERERS, ReportRenderer, ReportTheme
from .summary_loader import SummaryLoader


# Configure logging
logger = logging.getLogger(__name__)


class ReportRunner:
    """Resolves inputs, renders a report to the console and writes its analysis file."""

    def __init__(self, kind: ReportKind, config: Optional[Config] = None, console: Optional[Console] = None):
        self.kind = kind
        self.config = config or Config()
        self.console = console or Console(
            highlight=False,
            emoji=False,
            color_system="auto" if self.config.color else None,
        )
        theme = ReportTheme() if self.config.color else ReportTheme.plain()
        self.renderer: ReportRenderer = RENDERERS[kind](theme, self.config.visualization_script)
        self.resolver = InputResolver(self.config.reports_base_dir, self.config.sample_session)

    def emit(self, lines: List[str]) -> None:
        for line in lines:
            self.console.print(line, soft_wrap=True)

    def run(self, session: Optional[str] = None) -> int:
        """
        Run the complete report for a session.

        Args:
            session: Session timestamp; defaults to the bundled sample data.

        Returns:
            Process exit code.
        """
        session = session or self.config.sample_session
        self.emit(self.renderer.title(self.resolver.context_for(session)))

        try:
            context = self.resolver.resolve(session)
            rows = SummaryLoader.load(context.summary_path)
        except MissingSummaryFile as e:
            self.emit(self.renderer.missing_summary(e))
            return EXIT_MISSING_SUMMARY
        except SummaryFormatError as e:
            logger.error(f"Report aborted: {e}")
            self.emit(self.renderer.error(f"Error: {e}"))
            return EXIT_MISSING_SUMMARY

        hardware = HardwareInfoLoader.load(context.hardware_path)
        self.emit(self.renderer.body(rows, hardware))

        exit_code = EXIT_SUCCESS
        self.emit(self.renderer.analysis_started())
        try:
            analysis_path = AnalysisFileWriter.write(self.kind, context.reports_dir)
            self.emit(self.renderer.analysis_saved(analysis_path))
        except AnalysisWriteError as e:
            self.emit(self.renderer.error(f"Error: {e}"))
            exit_code = EXIT_ANALYSIS_WRITE_FAILED

        self.emit(self.renderer.visualization_hint(context))
        logger.info(f"{self.kind.value.capitalize()} report completed for session {session}")
        return exit_code
