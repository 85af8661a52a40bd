# LLM model performance report
# Displays models ranked by processing speed and efficiency metrics

import sys
from src.reports.cli import main
from src.reports.models import ReportKind


if __name__ == "__main__":
    sys.exit(main(ReportKind.PERFORMANCE))
