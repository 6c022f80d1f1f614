"""Schema definitions for structured data used in the project."""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


RawRow = Dict[str, Any]


@dataclass(frozen=True)
class ParseIssue:
    """A problem found while parsing one row, or the file as a whole when row_number is None."""
    row_number: Optional[int]
    column: Optional[str]
    message: str

    def __str__(self) -> str:
        where = "file" if self.row_number is None else f"row {self.row_number}"
        if self.column:
            where = f"{where}, column '{self.column}'"
        return f"{where}: {self.message}"


@dataclass(frozen=True)
class ParseResult:
    rows: Tuple[RawRow, ...] = ()
    issues: Tuple[ParseIssue, ...] = ()

    @property
    def error_count(self) -> int:
        return len(self.issues)


@dataclass(frozen=True)
class ComparisonRow:
    row_index: int
    xgboost: float
    neural_net: float
    difference: float               # neural_net - xgboost
    original_difference: float      # source "Difference" column, diagnostic only
    has_original_difference: bool = False


Dataset = Tuple[ComparisonRow, ...]


@dataclass(frozen=True)
class DifferenceMismatch:
    row_index: int
    expected: float                 # xgboost - neural_net
    reported: float


@dataclass(frozen=True)
class AggregateStats:
    total: int
    valid_count: int
    average_difference: Optional[float]     # None when no valid differences
    wins: int                               # difference > 0, Deep Learning ahead
    losses: int                             # difference < 0, XGBoost ahead
    ties: int
    win_pct: Optional[float]                # None when total == 0
    loss_pct: Optional[float]
    tie_pct: Optional[float]
    mismatches: Tuple[DifferenceMismatch, ...] = field(default=())

    @property
    def mismatch_count(self) -> int:
        return len(self.mismatches)
