"""Renders benchmark reports as lines of rich console markup."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

from rich.markup import escape

from src.const import (
    CPU_MARKER,
    DIVIDER_LINE,
    GPU_MARKER,
    RULE_LINE,
    TOTAL_MEMORY_MARKER,
    UNAVAILABLE,
)
from .classifier import RowClassifier
from .exceptions import MissingSummaryFile
from .leaderboard import LeaderboardExtractor
from .models import (
    BenchmarkRow,
    ClassifiedRow,
    EfficiencyTier,
    HardwareInfo,
    MemoryTier,
    ReportKind,
    SessionContext,
)
from .templates import ARCHITECTURE_NOTES, MEMORY_USAGE_NOTES, PERFORMANCE_METRIC_NOTES


def _default_efficiency_styles() -> Dict[EfficiencyTier, str]:
    return {
        EfficiencyTier.EXCELLENT: "green",
        EfficiencyTier.GOOD: "blue",
        EfficiencyTier.AVERAGE: "yellow",
        EfficiencyTier.POOR: "red",
        EfficiencyTier.NOT_AVAILABLE: "",
    }


def _default_memory_styles() -> Dict[MemoryTier, str]:
    return {
        MemoryTier.CRITICAL: "red",
        MemoryTier.HIGH: "yellow",
        MemoryTier.MODERATE: "blue",
        MemoryTier.NOMINAL: "green",
    }


@dataclass
class ReportTheme:
    """Display styles for report elements. An empty style means unstyled."""
    title: str = "bold green"
    heading: str = "bold"
    section: str = "bold blue"
    notes: str = "bold yellow"
    error: str = "red"
    warning: str = "yellow"
    info: str = "blue"
    efficiency: Dict[EfficiencyTier, str] = field(default_factory=_default_efficiency_styles)
    memory: Dict[MemoryTier, str] = field(default_factory=_default_memory_styles)

    @classmethod
    def plain(cls) -> "ReportTheme":
        """A theme that emits no styling at all."""
        return cls(
            title="", heading="", section="", notes="", error="", warning="", info="",
            efficiency={}, memory={},
        )

    @staticmethod
    def apply(text: str, style: Optional[str]) -> str:
        """Escape text for rich markup and wrap it in a style when one is set."""
        escaped = escape(text)
        if not style:
            return escaped
        return f"[{style}]{escaped}[/]"


def format_metric(value: Optional[float]) -> str:
    """Shortest text that reads back as the same metric value, without a trailing ``.0``."""
    if value is None:
        return UNAVAILABLE
    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_fixed(value: Optional[float], decimals: int, placeholder: str) -> str:
    if value is None:
        return placeholder
    return f"{value:.{decimals}f}"


class ReportRenderer(ABC):
    """Common layout shared by the memory and performance reports."""

    kind: ReportKind
    title_text: str
    visualization_flags: str

    def __init__(self, theme: Optional[ReportTheme] = None, visualization_script: Path = Path("visualize_benchmarks.py")):
        self.theme = theme or ReportTheme()
        self.visualization_script = visualization_script

    def _styled(self, text: str, style: Optional[str]) -> str:
        return self.theme.apply(text, style)

    def _section(self, text: str, style: str, underline: str = RULE_LINE) -> List[str]:
        return ["", self._styled(text, style), underline]

    def title(self, context: SessionContext) -> List[str]:
        suffix = "Sample Data" if context.is_sample else f"Session: {context.session}"
        return [self._styled(f"{self.title_text} ({suffix})", self.theme.title), RULE_LINE]

    def missing_summary(self, error: MissingSummaryFile) -> List[str]:
        """Explain a missing summary and, for real sessions, list the known ones."""
        lines = [self._styled(str(error), self.theme.error)]
        if error.candidates is None:
            lines.append(self._styled("Please run benchmark tests first or specify a valid session.", self.theme.warning))
            return lines

        lines.append(self._styled("Please specify a valid session timestamp.", self.theme.warning))
        lines.append(self._styled("Available sessions:", self.theme.warning))
        if error.candidates:
            lines.extend(escape(name) for name in error.candidates)
        else:
            lines.append("No sessions found")
        return lines

    def error(self, message: str) -> List[str]:
        return [self._styled(message, self.theme.error)]

    def hardware_lines(self, hardware: HardwareInfo, *markers: str) -> List[str]:
        lines = []
        for marker in markers:
            lines.extend(escape(line) for line in hardware.lines_containing(marker))
        return lines

    def notes(self, heading: str, notes: List[str], style: str, underline: str = RULE_LINE) -> List[str]:
        return self._section(heading, style, underline) + [escape(note) for note in notes]

    def analysis_started(self) -> List[str]:
        return ["", self._styled(f"Creating detailed {self.kind.value} analysis...", self.theme.heading)]

    def analysis_saved(self, path: Path) -> List[str]:
        label = self.kind.value.capitalize()
        return [self._styled(f"{label} analysis report saved to: {path}", self.theme.info)]

    def visualization_hint(self, context: SessionContext) -> List[str]:
        script = self.visualization_script
        return [
            "",
            self._styled(f"To visualize {self.kind.value} metrics:", self.theme.warning),
            f"Run the visualization script to generate {self.kind.value} charts:",
            escape(
                f"python {script} {self.visualization_flags} "
                f"--summary-path '{context.summary_path}' --output-dir '{context.reports_dir}'"
            ),
            "",
            "For all visualization options, run:",
            escape(f"python {script} --help"),
        ]

    @abstractmethod
    def body(self, rows: List[BenchmarkRow], hardware: Optional[HardwareInfo]) -> List[str]:
        """Render tables and analysis sections for the loaded rows."""
        pass


class MemoryReportRenderer(ReportRenderer):
    """Memory utilization and efficiency report."""

    kind = ReportKind.MEMORY
    title_text = "LLM Models Memory Utilization Report"
    visualization_flags = "--memory"

    def table(self, classified: List[ClassifiedRow]) -> List[str]:
        lines = [
            self._styled("Model Name                      | Parameters | Memory (MB) | Memory Efficiency", self.theme.heading),
            DIVIDER_LINE,
        ]
        for item in classified:
            tier = item.efficiency_tier
            cells = "%-30s | %-10s | %-10s | " % (item.row.model_name, item.param_bucket.value, format_metric(item.row.memory_mb))
            lines.append(escape(cells) + self._styled(tier.value, self.theme.efficiency.get(tier)))
        lines.append(DIVIDER_LINE)
        return lines

    def memory_context(self, hardware: HardwareInfo) -> List[str]:
        return self._section("System Memory Context", self.theme.section) + self.hardware_lines(
            hardware, TOTAL_MEMORY_MARKER, GPU_MARKER
        )

    def percentages(self, classified: List[ClassifiedRow]) -> List[str]:
        lines = self._section("Memory Utilization Percentages", self.theme.heading, DIVIDER_LINE)
        lines.append(self._styled("Model                         | % of System Memory", self.theme.heading))
        for item in classified:
            name = escape("%-30s | " % item.row.model_name)
            if item.memory_percent is None:
                lines.append(name + "%5s" % UNAVAILABLE)
            else:
                lines.append(name + self._styled("%5.1f%%" % item.memory_percent, self.theme.memory.get(item.memory_tier)))
        return lines

    def body(self, rows: List[BenchmarkRow], hardware: Optional[HardwareInfo]) -> List[str]:
        total_memory = hardware.total_memory_mb if hardware else None
        classified = RowClassifier.classify_all(rows, total_memory)

        lines = self.table(classified)
        if hardware is not None:
            lines.extend(self.memory_context(hardware))
            if RowClassifier.has_total_memory(total_memory):
                lines.extend(self.percentages(classified))
        lines.extend(self.notes("Memory Usage Analysis", MEMORY_USAGE_NOTES, self.theme.notes))
        return lines


class PerformanceReportRenderer(ReportRenderer):
    """Generation speed and CPU efficiency report."""

    kind = ReportKind.PERFORMANCE
    title_text = "LLM Models Performance Analysis"
    visualization_flags = "--performance --efficiency"

    def table(self, rows: List[BenchmarkRow]) -> List[str]:
        lines = [
            self._styled("Model Name                      | Tokens/Second | CPU % | Throughput Score", self.theme.heading),
            DIVIDER_LINE,
        ]
        for row in rows:
            tokens = format_fixed(row.tokens_per_sec, 2, "N/A      ")
            cpu = format_fixed(row.cpu_avg_pct, 1, "N/A   ")
            throughput = format_fixed(row.throughput_score, 2, "N/A      ")
            lines.append(escape("%-30s | %-12s | %-5s | %-15s" % (row.model_name, tokens, cpu, throughput)))
        lines.append(DIVIDER_LINE)
        return lines

    def leaderboard(self, rows: List[BenchmarkRow]) -> List[str]:
        lines = []
        fastest = LeaderboardExtractor.fastest(rows)
        if fastest is not None:
            lines.append("")
            lines.append(
                self._styled("Fastest Model:", self.theme.heading)
                + escape(f" {fastest.model_name} ({format_metric(fastest.tokens_per_sec)} tokens/sec)")
            )

        efficient = LeaderboardExtractor.most_efficient(rows)
        if efficient is not None:
            lines.append(
                self._styled("Most Efficient Model:", self.theme.heading)
                + escape(f" {efficient.model_name} (throughput score: {format_metric(efficient.throughput_score)})")
            )
        return lines

    def hardware_context(self, hardware: HardwareInfo) -> List[str]:
        return self._section("Hardware Context", self.theme.section) + self.hardware_lines(hardware, CPU_MARKER, GPU_MARKER)

    def body(self, rows: List[BenchmarkRow], hardware: Optional[HardwareInfo]) -> List[str]:
        lines = self.table(rows)
        lines.extend(self.leaderboard(rows))
        if hardware is not None:
            lines.extend(self.hardware_context(hardware))
        lines.extend(self.notes("Performance Metrics Explained", PERFORMANCE_METRIC_NOTES, self.theme.notes))
        lines.extend(
            self.notes("Model Architecture Performance Analysis", ARCHITECTURE_NOTES, self.theme.heading, DIVIDER_LINE)
        )
        return lines


RENDERERS = {
    ReportKind.MEMORY: MemoryReportRenderer,
    ReportKind.PERFORMANCE: PerformanceReportRenderer,
}
