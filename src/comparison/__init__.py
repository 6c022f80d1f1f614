"""Load, parse and summarise paired Neural Net / XGBoost AUROC scores."""

from comparison.aggregator import compute_stats, find_difference_mismatches
from comparison.loader import LoadError, load_text
from comparison.parser import parse_csv
from comparison.state import ComparisonResult, ComparisonView, ViewState, load_comparison
from comparison.transformer import to_comparison_row, transform_rows

__all__ = [
    "ComparisonResult",
    "ComparisonView",
    "LoadError",
    "ViewState",
    "compute_stats",
    "find_difference_mismatches",
    "load_comparison",
    "load_text",
    "parse_csv",
    "to_comparison_row",
    "transform_rows",
]
