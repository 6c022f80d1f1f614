#!/usr/bin/env python3
"""
Render the AUROC difference chart to an image file.

Loads the comparison CSV the same way the dashboard does, writes the
matplotlib chart and prints a one-line summary. Exits with status 1 when
the file could not be loaded.
"""

import argparse
import asyncio
import sys
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

# Add src and repository root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
sys.path.insert(0, str(Path(__file__).parent.parent))

from config.config import LOG_LEVEL
from config.models import DashboardConfig
from comparison.state import ComparisonView
from dashboard.components.auroc_difference import build_static_figure, key_finding_text
from dashboard.components.layout import format_number, format_percent
from utils.io import ensure_dir
from utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("--data-dir", default=None, help="Directory holding the CSV file")
    parser.add_argument("--file-name", default=None, help="CSV file name (default: diff.csv)")
    parser.add_argument("--output", default="auroc_difference.png", help="Image path to write")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def summary_line(stats) -> str:
    return (
        f"comparisons={stats.total} "
        f"average={format_number(stats.average_difference)} "
        f"dl_wins={stats.wins} ({format_percent(stats.win_pct)}) "
        f"xgb_wins={stats.losses} ({format_percent(stats.loss_pct)}) "
        f"ties={stats.ties} ({format_percent(stats.tie_pct)})"
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_level)

    config = DashboardConfig.from_defaults(data_dir=args.data_dir, file_name=args.file_name)
    view = ComparisonView(config)
    state = asyncio.run(view.activate())

    if state.result.error:
        print(f"❌ {state.result.error}")
        return 1

    output = Path(args.output)
    ensure_dir(output.parent)
    fig = build_static_figure(state.dataset, state.stats)
    fig.savefig(output, dpi=150)
    plt.close(fig)
    logger.info(f"Chart written to {output}")

    print(summary_line(state.stats))
    print(key_finding_text(state.stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())
