"""Summary statistics over a comparison dataset."""

from typing import Optional, Sequence, Tuple

import numpy as np

from config.config import MISMATCH_TOLERANCE
from config.schemas import AggregateStats, ComparisonRow, DifferenceMismatch
from utils.logging import get_logger

logger = get_logger(__name__)


def _percentage(count: int, total: int) -> Optional[float]:
    if total == 0:
        return None
    return count / total * 100


def average_difference(dataset: Sequence[ComparisonRow]) -> Optional[float]:
    """Mean of all finite differences, or None when there are none."""
    differences = np.array([row.difference for row in dataset], dtype=float)
    valid = differences[np.isfinite(differences)]
    if valid.size == 0:
        return None
    return float(valid.sum() / valid.size)


def find_difference_mismatches(
    dataset: Sequence[ComparisonRow],
    tolerance: float = MISMATCH_TOLERANCE,
) -> Tuple[DifferenceMismatch, ...]:
    """
    Cross-check the source file's own Difference column.

    The source exports Difference as XGBoost minus Neural Net, so each
    reported value is compared against ``xgboost - neural_net``. Rows that
    did not supply a Difference value are not checked.
    """
    mismatches = []
    for row in dataset:
        if not row.has_original_difference:
            continue
        expected = row.xgboost - row.neural_net
        if abs(row.original_difference - expected) > tolerance:
            mismatches.append(DifferenceMismatch(
                row_index=row.row_index,
                expected=expected,
                reported=row.original_difference,
            ))
    return tuple(mismatches)


def compute_stats(
    dataset: Sequence[ComparisonRow],
    mismatch_tolerance: float = MISMATCH_TOLERANCE,
) -> AggregateStats:
    """
    Compute the mean difference and win/loss/tie counts.

    Args:
        dataset: Comparison rows
        mismatch_tolerance: Allowed gap between the source Difference column
            and the recomputed value before a row is flagged

    Returns:
        AggregateStats; the average and percentages are None for an empty
        dataset, and the average is None when no difference is a number
    """
    total = len(dataset)
    differences = np.array([row.difference for row in dataset], dtype=float)

    wins = int(np.count_nonzero(differences > 0))
    losses = int(np.count_nonzero(differences < 0))
    ties = int(np.count_nonzero(differences == 0))
    valid_count = int(np.count_nonzero(np.isfinite(differences)))

    mismatches = find_difference_mismatches(dataset, mismatch_tolerance)
    if mismatches:
        logger.warning(
            f"{len(mismatches)} of {total} rows have a Difference column that does not "
            f"match Xgboost - Neural Net (tolerance {mismatch_tolerance})"
        )

    return AggregateStats(
        total=total,
        valid_count=valid_count,
        average_difference=average_difference(dataset),
        wins=wins,
        losses=losses,
        ties=ties,
        win_pct=_percentage(wins, total),
        loss_pct=_percentage(losses, total),
        tie_pct=_percentage(ties, total),
        mismatches=mismatches,
    )
