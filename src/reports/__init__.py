"""Benchmark reports package initialization."""
from .models import (
    BenchmarkRow,
    ClassifiedRow,
    EfficiencyTier,
    HardwareInfo,
    LeaderboardColumn,
    MemoryTier,
    ParamBucket,
    ReportKind,
    SessionContext,
)
from .exceptions import AnalysisWriteError, MissingSummaryFile, ReportError, SummaryFormatError
from .input_resolver import InputResolver
from .summary_loader import SummaryLoader
from .hardware import HardwareInfoLoader
from .classifier import RowClassifier
from .leaderboard import LeaderboardExtractor
from .renderer import MemoryReportRenderer, PerformanceReportRenderer, ReportRenderer, ReportTheme
from .analysis_writer import AnalysisFileWriter
from .runner import ReportRunner

__all__ = [
    'BenchmarkRow',
    'ClassifiedRow',
    'EfficiencyTier',
    'HardwareInfo',
    'LeaderboardColumn',
    'MemoryTier',
    'ParamBucket',
    'ReportKind',
    'SessionContext',
    'AnalysisWriteError',
    'MissingSummaryFile',
    'ReportError',
    'SummaryFormatError',
    'InputResolver',
    'SummaryLoader',
    'HardwareInfoLoader',
    'RowClassifier',
    'LeaderboardExtractor',
    'MemoryReportRenderer',
    'PerformanceReportRenderer',
    'ReportRenderer',
    'ReportTheme',
    'AnalysisFileWriter',
    'ReportRunner'
]
