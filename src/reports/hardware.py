"""Reads the optional hardware description of a benchmark session."""
import logging
import re
from pathlib import Path
from typing import Optional, Union

from src.const import TOTAL_MEMORY_MARKER
from .models import HardwareInfo


# Configure logging
logger = logging.getLogger(__name__)


class HardwareInfoLoader:
    """Loads ``hardware_info.txt`` into a HardwareInfo."""

    @staticmethod
    def load(input_path: Union[Path, str]) -> Optional[HardwareInfo]:
        """
        Load hardware info if the file exists.

        Args:
            input_path: Path to the hardware info text file.

        Returns:
            HardwareInfo, or None when the file is absent.
        """
        input_path = Path(input_path)
        if not input_path.is_file():
            logger.info(f"No hardware info at {input_path}; skipping hardware sections")
            return None

        info = HardwareInfoLoader.parse(input_path.read_text(encoding="utf-8", errors="replace"))
        logger.info(f"Hardware info loaded from: {input_path}")
        return info

    @staticmethod
    def parse(text: str) -> HardwareInfo:
        """Parse hardware info text; only the total memory line is interpreted."""
        lines = text.splitlines()
        info = HardwareInfo(lines=lines)
        memory_lines = info.lines_containing(TOTAL_MEMORY_MARKER)
        if memory_lines:
            info.total_memory_mb = HardwareInfoLoader.extract_number(memory_lines[0])
        return info

    @staticmethod
    def extract_number(line: str) -> Optional[int]:
        """Strip every non-digit character and read what is left as a number."""
        digits = re.sub(r"[^0-9]", "", line)
        if not digits:
            return None
        return int(digits)
