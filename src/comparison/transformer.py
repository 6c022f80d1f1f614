"""Map raw CSV rows onto typed comparison rows."""

import math
from typing import Any, Iterable, Mapping, Optional

from config.config import DIFFERENCE_COL, NEURAL_NET_COL, ROW_INDEX_COL, XGBOOST_COL
from config.schemas import ComparisonRow, Dataset


def _as_float(value: Any) -> Optional[float]:
    """Return ``value`` as a float, or None when it is missing, non-numeric or not finite."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _number_or_zero(value: Any) -> float:
    number = _as_float(value)
    return 0.0 if number is None else number


def _row_index(row: Mapping[str, Any], position: int) -> int:
    number = _as_float(row.get(ROW_INDEX_COL))
    if number is None:
        return position
    return int(number)


def to_comparison_row(row: Mapping[str, Any], position: int) -> ComparisonRow:
    """
    Build one comparison row.

    Args:
        row: Raw row keyed by CSV header
        position: Zero-based position of the row, used when it has no index

    Returns:
        ComparisonRow whose difference is Neural Net minus XGBoost
    """
    xgboost = _number_or_zero(row.get(XGBOOST_COL))
    neural_net = _number_or_zero(row.get(NEURAL_NET_COL))
    original = _as_float(row.get(DIFFERENCE_COL))

    return ComparisonRow(
        row_index=_row_index(row, position),
        xgboost=xgboost,
        neural_net=neural_net,
        difference=neural_net - xgboost,
        original_difference=0.0 if original is None else original,
        has_original_difference=original is not None,
    )


def transform_rows(rows: Iterable[Mapping[str, Any]]) -> Dataset:
    """Transform raw rows in order; output length always equals input length."""
    return tuple(to_comparison_row(row, position) for position, row in enumerate(rows))
