"""Shared test configuration and fixtures for all tests."""

import io
from unittest.mock import patch

import pytest
from rich.console import Console

from src.reports.models import BenchmarkRow
from src.shared.config import Config
from src.shared.logging import LoggingManager
from .test_const import CONSOLE_WIDTH


@pytest.fixture
def reports_dir(tmp_path):
    """Empty base reports directory."""
    base = tmp_path / "reports"
    base.mkdir()
    return base


@pytest.fixture
def report_config(reports_dir):
    """Configuration pointing at the temporary reports directory."""
    return Config(reports_base_dir=reports_dir, color=False)


@pytest.fixture
def console():
    """Console that records output instead of writing to the terminal."""
    return Console(file=io.StringIO(), color_system=None, width=CONSOLE_WIDTH, highlight=False, emoji=False)


@pytest.fixture
def mock_logging():
    """Mock logging module fixture."""
    with patch('src.shared.logging.logging') as mock_logging, \
            patch.object(LoggingManager, '_handler', None):
        yield mock_logging


@pytest.fixture
def sample_rows():
    """Rows covering every efficiency tier and an unavailable speed."""
    return [
        BenchmarkRow("mixtral-8x7b-q5", 32640.0, 96.7, 88.3, 11.37, 0.17, 0.129, 87.9),
        BenchmarkRow("mistral-7b-q4", 4370.0, 82.5, 71.9, 38.52, 1.42, 0.536, 25.9),
        BenchmarkRow("llama2-7b-fp16", 13480.0, 88.2, 79.4, 17.95, 0.58, 0.226, 55.7),
        BenchmarkRow("phi3-mini", 2390.0, None, None, None, None, None, 22.1),
    ]
