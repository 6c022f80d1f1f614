"""End-to-end tests: CSV file on disk through the view to the rendered panel."""

import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import pytest

from comparison.state import ComparisonView, ViewState
from config.models import DashboardConfig
from dashboard.components import auroc_difference
from tests.helpers import make_csv

scripts_path = Path(__file__).parent.parent.parent / "scripts"
sys.path.insert(0, str(scripts_path))

import render_difference_plot

pytestmark = pytest.mark.integration


@pytest.mark.asyncio
async def test_file_to_panel(write_csv):
    config = write_csv(make_csv([
        (0, 0.90, 0.85, 0.05),
        (1, 0.80, 0.95, -0.15),
        (2, 0.75, 0.75, 0.0),
    ]))
    view = ComparisonView(config)
    state = await view.activate()

    panel = auroc_difference.render_panel(state, config=config)

    assert panel["status"] == "success"
    assert panel["total_count"] == 3
    assert (panel["wins"], panel["losses"], panel["ties"]) == (1, 1, 1)
    assert panel["average_difference"] == pytest.approx(0.1 / 3)
    assert panel["issue_count"] == 0
    assert panel["mismatch_count"] == 0


@pytest.mark.asyncio
async def test_missing_file_renders_no_data(temp_data_dir):
    config = DashboardConfig(data_dir=temp_data_dir, file_name="absent.csv")
    state = await ComparisonView(config).activate()

    panel = auroc_difference.render_panel(state, config=config)

    assert not state.loading
    assert panel["status"] == "no_data"
    assert "absent.csv" in panel["error"]


@pytest.mark.asyncio
async def test_header_only_file_renders_no_data(write_csv, header_only_csv):
    config = write_csv(header_only_csv)
    state = await ComparisonView(config).activate()

    panel = auroc_difference.render_panel(state, config=config)

    assert panel["status"] == "no_data"
    assert panel["error"] is None
    assert state.stats.average_difference is None


@pytest.mark.asyncio
async def test_malformed_rows_still_render(write_csv):
    text = make_csv([(0, 0.9, 0.85, 0.05), (1, "bad", 0.95, -0.15)]) + "2,0.7,0.8,-0.1,extra\n"
    config = write_csv(text)
    state = await ComparisonView(config).activate()

    panel = auroc_difference.render_panel(state, config=config)

    assert panel["status"] == "success"
    assert panel["total_count"] == 3
    assert panel["issue_count"] == 2
    assert state.dataset[1].xgboost == 0.0
    assert state.dataset[1].difference == 0.95
    # Row 1's source Difference no longer matches once Xgboost defaulted to 0
    assert panel["mismatch_count"] == 1


def test_loading_state_renders_indicator():
    panel = auroc_difference.render_panel(ViewState.initial())
    assert panel["status"] == "loading"


def test_export_script_writes_chart(write_csv, temp_data_dir, capsys):
    write_csv(make_csv([(0, 0.90, 0.85, 0.05), (1, 0.80, 0.95, -0.15)]))
    output = temp_data_dir / "out" / "chart.png"

    exit_code = render_difference_plot.main([
        "--data-dir", str(temp_data_dir),
        "--output", str(output),
        "--log-level", "WARNING",
    ])

    assert exit_code == 0
    assert output.exists()
    printed = capsys.readouterr().out
    assert "comparisons=2" in printed
    assert "dl_wins=1 (50.0%)" in printed


def test_export_script_fails_on_missing_file(temp_data_dir, capsys):
    exit_code = render_difference_plot.main([
        "--data-dir", str(temp_data_dir),
        "--file-name", "nope.csv",
        "--output", str(temp_data_dir / "chart.png"),
    ])

    assert exit_code == 1
    assert "nope.csv" in capsys.readouterr().out
