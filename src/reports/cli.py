"""Command-line interface for the benchmark reports."""
import argparse
from pathlib import Path
from typing import List, Optional

from src.const import DEFAULT_SAMPLE_SESSION
from src.shared.config import Config
from src.shared.logging import LoggingManager

from .models import ReportKind
from .runner import ReportRunner


DESCRIPTIONS = {
    ReportKind.MEMORY: "Display models ranked by memory utilization and efficiency",
    ReportKind.PERFORMANCE: "Display models ranked by processing speed and efficiency metrics",
}


def create_parser(kind: Optional[ReportKind] = None) -> argparse.ArgumentParser:
    """Create the argument parser; without a kind the report is chosen on the command line."""
    parser = argparse.ArgumentParser(
        description=DESCRIPTIONS[kind] if kind else "LLM benchmark reports",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Report on the bundled sample data
  python model_memory_report.py

  # Report on one benchmark session
  python model_performance_report.py 2025-03-14_09:26:53
""",
    )
    if kind is None:
        parser.add_argument("report", choices=[k.value for k in ReportKind], help="Report to display")
    parser.add_argument(
        "session",
        nargs="?",
        default=None,
        help=f"Session timestamp (YYYY-MM-DD_HH:MM:SS) or '{DEFAULT_SAMPLE_SESSION}' (default: sample data)",
    )
    parser.add_argument("--reports-dir", type=Path, help="Base directory holding session reports")
    parser.add_argument("--log-level", help="Logging level (default: from configuration)")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    return parser


def main(kind: Optional[ReportKind] = None, argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run one report and return its exit code."""
    args = create_parser(kind).parse_args(argv)
    kind = kind or ReportKind(args.report)

    # Flags given on the command line win over every configured source
    overrides = {}
    if args.reports_dir is not None:
        overrides["reports_base_dir"] = args.reports_dir
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.no_color:
        overrides["color"] = False
    config = Config().model_copy(update=overrides)

    LoggingManager.setup_logging(config.log_level, config)
    return ReportRunner(kind, config).run(args.session)
