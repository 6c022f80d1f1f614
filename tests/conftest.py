"""Test configuration and shared fixtures."""

import pytest
import tempfile
from pathlib import Path

from config.models import DashboardConfig
from tests.helpers import CSV_HEADER, make_csv


@pytest.fixture
def temp_data_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_csv_text():
    """Two comparisons: XGBoost wins the first, Deep Learning the second."""
    return make_csv([
        (0, 0.90, 0.85, 0.05),
        (1, 0.80, 0.95, -0.15),
    ])


@pytest.fixture
def write_csv(temp_data_dir):
    """Write CSV text into the temp data dir and return its config."""
    def _write(text: str, file_name: str = "diff.csv") -> DashboardConfig:
        (temp_data_dir / file_name).write_text(text, encoding="utf-8")
        return DashboardConfig(data_dir=temp_data_dir, file_name=file_name)
    return _write


@pytest.fixture
def header_only_csv():
    return CSV_HEADER + "\n"
