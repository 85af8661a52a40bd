"""Constants for the LLM benchmark reports."""

# Default configuration values
DEFAULT_REPORTS_BASE_DIR = "reports"
DEFAULT_SAMPLE_SESSION = "sample"
DEFAULT_VISUALIZATION_SCRIPT = "visualize_benchmarks.py"
ENV_PREFIX = "LLM_REPORTS_"

# Logging configuration
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Library log levels
LIBRARY_LOG_LEVELS = {
    "markdown_it": "WARNING",
}

# File and directory names
CONFIG_FILE_NAME = "config.json"
SAMPLE_DIR_NAME = "sample"
SAMPLE_SUMMARY_FILE_NAME = "sample_summary.csv"
SUMMARY_FILE_NAME = "summary.csv"
HARDWARE_INFO_FILE_NAME = "hardware_info.txt"
MEMORY_ANALYSIS_FILE_NAME = "memory_analysis.txt"
PERFORMANCE_ANALYSIS_FILE_NAME = "performance_analysis.txt"

# Session directories are named after the benchmark start time
SESSION_PATTERN = r"[0-9]{4}-[0-9]{2}-[0-9]{2}_[0-9]{2}:[0-9]{2}:[0-9]{2}"

# Summary table layout
UNAVAILABLE = "N/A"
SUMMARY_COLUMNS = [
    "model_name",
    "memory_mb",
    "cpu_peak_pct",
    "cpu_avg_pct",
    "tokens_per_sec",
    "tokens_per_mb",
    "throughput_score",
    "elapsed_time",
]

# Hardware info line markers
TOTAL_MEMORY_MARKER = "Total System Memory"
CPU_MARKER = "CPU"
GPU_MARKER = "GPU"

# Parameter size markers, most specific first
PARAM_SIZE_MARKERS = [
    ("70b", "70B"),
    ("72b", "72B"),
    ("8x7b", "8x7B"),
    ("7b", "7B"),
]

# Efficiency thresholds (tokens per MB, strictly greater than)
EFFICIENCY_EXCELLENT_THRESHOLD = 1.0
EFFICIENCY_GOOD_THRESHOLD = 0.5
EFFICIENCY_AVERAGE_THRESHOLD = 0.2

# Memory utilization thresholds (percent of system memory, strictly greater than)
MEMORY_CRITICAL_THRESHOLD = 75
MEMORY_HIGH_THRESHOLD = 50
MEMORY_MODERATE_THRESHOLD = 25

# Exit codes
EXIT_SUCCESS = 0
EXIT_MISSING_SUMMARY = 1
EXIT_ANALYSIS_WRITE_FAILED = 2

# Rendering
RULE_LINE = "=" * 60
DIVIDER_LINE = "-" * 60
