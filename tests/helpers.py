"""Helpers shared by report tests."""

from pathlib import Path
from typing import List

from rich.text import Text

from .test_const import SUMMARY_HEADER


def plain_lines(lines: List[str]) -> List[str]:
    """Strip rich markup from rendered lines."""
    return [Text.from_markup(line).plain for line in lines]


def write_summary(path: Path, *rows: str, header: str = SUMMARY_HEADER) -> Path:
    """Write a summary CSV with a header line followed by the given rows."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join([header, *rows]) + "\n", encoding="utf-8")
    return path
