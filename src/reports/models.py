"""Data models for the benchmark reports."""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional


class ReportKind(str, Enum):
    """The two reports built from one summary table."""
    MEMORY = "memory"
    PERFORMANCE = "performance"


class ParamBucket(str, Enum):
    """Parameter-size bucket guessed from the model name."""
    B70 = "70B"
    B72 = "72B"
    B8X7 = "8x7B"
    B7 = "7B"
    UNKNOWN = "Unknown"


class EfficiencyTier(str, Enum):
    """Memory efficiency rating derived from tokens per MB."""
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    NOT_AVAILABLE = "N/A"


class MemoryTier(str, Enum):
    """Share of total system memory used by a model."""
    CRITICAL = "Critical"
    HIGH = "High"
    MODERATE = "Moderate"
    NOMINAL = "Nominal"


class LeaderboardColumn(str, Enum):
    """Summary columns a leaderboard can be ranked by."""
    TOKENS_PER_SEC = "tokens_per_sec"
    THROUGHPUT_SCORE = "throughput_score"


@dataclass(frozen=True)
class BenchmarkRow:
    """One summary row. ``None`` marks a metric that could not be measured."""
    model_name: str
    memory_mb: Optional[float] = None
    cpu_peak_pct: Optional[float] = None
    cpu_avg_pct: Optional[float] = None
    tokens_per_sec: Optional[float] = None
    tokens_per_mb: Optional[float] = None
    throughput_score: Optional[float] = None
    elapsed_time: Optional[float] = None

    def metric(self, column: LeaderboardColumn) -> Optional[float]:
        return getattr(self, column.value)


@dataclass(frozen=True)
class ClassifiedRow:
    """A summary row together with its derived labels."""
    row: BenchmarkRow
    param_bucket: ParamBucket
    efficiency_tier: EfficiencyTier
    memory_percent: Optional[float] = None
    memory_tier: Optional[MemoryTier] = None


@dataclass
class HardwareInfo:
    """Free-text hardware description written next to a summary."""
    lines: List[str] = field(default_factory=list)
    total_memory_mb: Optional[int] = None

    def lines_containing(self, text: str) -> List[str]:
        return [line for line in self.lines if text in line]


@dataclass
class SessionContext:
    """Where one report reads its inputs and writes its analysis file."""
    session: str
    is_sample: bool
    reports_dir: Path
    summary_path: Path
    hardware_path: Path
