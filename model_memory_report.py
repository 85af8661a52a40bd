# LLM model memory report
# Displays models ranked by memory utilization and efficiency

import sys
from src.reports.cli import main
from src.reports.models import ReportKind


if __name__ == "__main__":
    sys.exit(main(ReportKind.MEMORY))
