"""Loads the benchmark summary table."""
import logging
import math
from pathlib import Path
from typing import Any, List, Optional, Union

import pandas as pd

from src.const import SUMMARY_COLUMNS, UNAVAILABLE
from .exceptions import SummaryFormatError
from .models import BenchmarkRow


# Configure logging
logger = logging.getLogger(__name__)


class SummaryLoader:
    """Reads ``summary.csv`` positionally into BenchmarkRow records."""

    @staticmethod
    def load(input_path: Union[Path, str]) -> List[BenchmarkRow]:
        """
        Load summary rows from CSV.

        The first line is always a header and is skipped. Columns are taken by
        position, never by header name.

        Args:
            input_path: Path to the summary CSV.

        Returns:
            List of rows in file order.

        Raises:
            SummaryFormatError: If the table does not have the expected layout.
        """
        try:
            df = pd.read_csv(input_path, header=None, dtype=str, keep_default_na=False, skip_blank_lines=True)
        except pd.errors.EmptyDataError:
            logger.warning(f"Summary file is empty: {input_path}")
            return []
        except (pd.errors.ParserError, UnicodeDecodeError) as e:
            raise SummaryFormatError(f"Malformed summary file {input_path}: {e}") from e
        except OSError as e:
            raise SummaryFormatError(f"Could not read summary file {input_path}: {e}") from e

        if df.shape[1] != len(SUMMARY_COLUMNS):
            raise SummaryFormatError(
                f"Expected {len(SUMMARY_COLUMNS)} columns in {input_path}, found {df.shape[1]}"
            )

        df.columns = SUMMARY_COLUMNS
        rows = []
        for idx, record in df.iloc[1:].iterrows():
            # pandas pads short rows with NaN
            if record.isna().any():
                raise SummaryFormatError(
                    f"Line {idx + 1} of {input_path}: expected {len(SUMMARY_COLUMNS)} fields"
                )
            try:
                rows.append(SummaryLoader.parse_record(record.tolist()))
            except ValueError as e:
                # idx is zero-based and includes the header line
                raise SummaryFormatError(f"Line {idx + 1} of {input_path}: {e}") from e

        logger.info(f"Loaded {len(rows)} summary rows from: {input_path}")
        return rows

    @staticmethod
    def parse_record(fields: List[Any]) -> BenchmarkRow:
        """Build a row from its eight positional fields."""
        model_name = SummaryLoader._text(fields[0])
        metrics = [SummaryLoader.parse_metric(value) for value in fields[1:]]
        return BenchmarkRow(model_name, *metrics)

    @staticmethod
    def parse_metric(value: Any) -> Optional[float]:
        """
        Convert one metric field, mapping the unavailable marker to None.

        Raises:
            ValueError: If the field is neither a number nor the marker.
        """
        text = SummaryLoader._text(value).strip()
        if text in (UNAVAILABLE, ""):
            return None
        try:
            number = float(text)
        except ValueError:
            raise ValueError(f"not a number: {text!r}")
        if not math.isfinite(number):
            raise ValueError(f"not a finite number: {text!r}")
        return number

    @staticmethod
    def _text(value: Any) -> str:
        if isinstance(value, str):
            return value
        return "" if value is None else str(value)
