"""Derives categorical labels for summary rows."""
import logging
from typing import List, Optional

from src.const import (
    EFFICIENCY_AVERAGE_THRESHOLD,
    EFFICIENCY_EXCELLENT_THRESHOLD,
    EFFICIENCY_GOOD_THRESHOLD,
    MEMORY_CRITICAL_THRESHOLD,
    MEMORY_HIGH_THRESHOLD,
    MEMORY_MODERATE_THRESHOLD,
    PARAM_SIZE_MARKERS,
)
from .models import BenchmarkRow, ClassifiedRow, EfficiencyTier, MemoryTier, ParamBucket


# Configure logging
logger = logging.getLogger(__name__)


class RowClassifier:
    """Classifies summary rows by parameter size, efficiency and memory share."""

    @staticmethod
    def param_bucket(model_name: str) -> ParamBucket:
        """
        Guess the parameter-size bucket from a model name.

        Markers are checked in a fixed order; "8x7b" must win over "7b".

        Args:
            model_name: Model identifier, e.g. "mixtral-8x7b-q4".

        Returns:
            The first matching bucket, or ParamBucket.UNKNOWN.
        """
        for marker, bucket in PARAM_SIZE_MARKERS:
            if marker in model_name:
                return ParamBucket(bucket)
        return ParamBucket.UNKNOWN

    @staticmethod
    def efficiency_tier(tokens_per_mb: Optional[float]) -> EfficiencyTier:
        """Rate tokens per MB; every threshold is a strict greater-than."""
        if tokens_per_mb is None:
            return EfficiencyTier.NOT_AVAILABLE
        if tokens_per_mb > EFFICIENCY_EXCELLENT_THRESHOLD:
            return EfficiencyTier.EXCELLENT
        if tokens_per_mb > EFFICIENCY_GOOD_THRESHOLD:
            return EfficiencyTier.GOOD
        if tokens_per_mb > EFFICIENCY_AVERAGE_THRESHOLD:
            return EfficiencyTier.AVERAGE
        return EfficiencyTier.POOR

    @staticmethod
    def has_total_memory(total_memory_mb: Optional[float]) -> bool:
        """Whether a total memory value can be used as a divisor."""
        if isinstance(total_memory_mb, bool) or not isinstance(total_memory_mb, (int, float)):
            return False
        return total_memory_mb > 0

    @staticmethod
    def memory_percent(memory_mb: Optional[float], total_memory_mb: Optional[float]) -> Optional[float]:
        """Share of system memory in percent, rounded to one decimal place."""
        if memory_mb is None or not RowClassifier.has_total_memory(total_memory_mb):
            return None
        return round(memory_mb / total_memory_mb * 100, 1)

    @staticmethod
    def memory_tier(percent: Optional[float]) -> Optional[MemoryTier]:
        if percent is None:
            return None
        if percent > MEMORY_CRITICAL_THRESHOLD:
            return MemoryTier.CRITICAL
        if percent > MEMORY_HIGH_THRESHOLD:
            return MemoryTier.HIGH
        if percent > MEMORY_MODERATE_THRESHOLD:
            return MemoryTier.MODERATE
        return MemoryTier.NOMINAL

    @staticmethod
    def classify(row: BenchmarkRow, total_memory_mb: Optional[float] = None) -> ClassifiedRow:
        """
        Classify one row.

        Args:
            row: Summary row.
            total_memory_mb: Total system memory; memory share is skipped
                unless this is a positive number.

        Returns:
            ClassifiedRow with all labels that apply.
        """
        percent = RowClassifier.memory_percent(row.memory_mb, total_memory_mb)
        return ClassifiedRow(
            row=row,
            param_bucket=RowClassifier.param_bucket(row.model_name),
            efficiency_tier=RowClassifier.efficiency_tier(row.tokens_per_mb),
            memory_percent=percent,
            memory_tier=RowClassifier.memory_tier(percent),
        )

    @staticmethod
    def classify_all(rows: List[BenchmarkRow], total_memory_mb: Optional[float] = None) -> List[ClassifiedRow]:
        if not RowClassifier.has_total_memory(total_memory_mb):
            logger.debug("Total system memory unknown; skipping memory share classification")
            total_memory_mb = None
        return [RowClassifier.classify(row, total_memory_mb) for row in rows]
