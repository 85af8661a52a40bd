"""Resolves which summary and hardware files a report reads."""
import logging
import re
from pathlib import Path
from typing import List, Union

from src.const import (
    HARDWARE_INFO_FILE_NAME,
    SAMPLE_DIR_NAME,
    SAMPLE_SUMMARY_FILE_NAME,
    SESSION_PATTERN,
    SUMMARY_FILE_NAME,
)
from .exceptions import MissingSummaryFile
from .models import SessionContext


# Configure logging
logger = logging.getLogger(__name__)


class InputResolver:
    """Maps a session identifier to the files under the reports directory."""

    def __init__(self, base_dir: Union[Path, str], sample_session: str = "sample"):
        self.base_dir = Path(base_dir)
        self.sample_session = sample_session

    def context_for(self, session: str) -> SessionContext:
        """
        Build the session context without touching the filesystem.

        Args:
            session: Session timestamp, or the sample sentinel.

        Returns:
            SessionContext with the report directory and input paths.
        """
        if session == self.sample_session:
            reports_dir = self.base_dir
            summary_path = reports_dir / SAMPLE_DIR_NAME / SAMPLE_SUMMARY_FILE_NAME
        else:
            reports_dir = self.base_dir / session
            summary_path = reports_dir / SUMMARY_FILE_NAME

        return SessionContext(
            session=session,
            is_sample=session == self.sample_session,
            reports_dir=reports_dir,
            summary_path=summary_path,
            hardware_path=reports_dir / HARDWARE_INFO_FILE_NAME,
        )

    def resolve(self, session: str) -> SessionContext:
        """
        Resolve a session and check that its summary table exists.

        The report directory is created when absent; the summary file never is.

        Args:
            session: Session timestamp, or the sample sentinel.

        Returns:
            SessionContext for the session.

        Raises:
            MissingSummaryFile: If the summary table does not exist.
        """
        context = self.context_for(session)
        context.reports_dir.mkdir(parents=True, exist_ok=True)

        if not context.summary_path.is_file():
            candidates = None if context.is_sample else [name for name in self.list_sessions() if name != session]
            logger.error(f"Summary file not found: {context.summary_path}")
            raise MissingSummaryFile(context.summary_path, session, candidates)

        logger.info(f"Using summary file: {context.summary_path}")
        return context

    def list_sessions(self) -> List[str]:
        """List entries of the base directory named like a session timestamp."""
        if not self.base_dir.is_dir():
            return []
        pattern = re.compile(SESSION_PATTERN)
        return sorted(entry.name for entry in self.base_dir.iterdir() if pattern.search(entry.name))
