"""Project-wide single-source configuration constants for the AUROC difference dashboard."""

from pathlib import Path
from utils.path_utils import find_repo_root

# ----- Base directory configuration -------
PROJECT_ROOT = find_repo_root()
DATA_DIR: Path = PROJECT_ROOT / "datasets"

# ------ IO paths -------
DIFF_CSV_NAME: str = "diff.csv"
FILE_ENCODING: str = "utf-8"

# ------ CSV columns -------
ROW_INDEX_COL: str = "Row Index"
XGBOOST_COL: str = "Xgboost (AUROC)"
NEURAL_NET_COL: str = "Neural Net (AUROC)"
DIFFERENCE_COL: str = "Difference"          # XGBoost - Neural Net, as exported by the source
REQUIRED_COLUMNS: tuple[str, ...] = (XGBOOST_COL, NEURAL_NET_COL)
NUMERIC_COLUMNS: tuple[str, ...] = (XGBOOST_COL, NEURAL_NET_COL, DIFFERENCE_COL)

# ------ Integrity checks -------
MISMATCH_TOLERANCE: float = 1e-6            # |Difference - (xgb - nn)| allowed before flagging

# ------ Display precision -------
TOOLTIP_DECIMALS: int = 4                   # hover values and average badge
AVERAGE_LABEL_DECIMALS: int = 3             # average reference-line label
PERCENT_DECIMALS: int = 1                   # win/loss/tie percentages
NOT_AVAILABLE: str = "N/A"                  # sentinel for undefined statistics

# ------ Chart text -------
CHART_SUBTITLE: str = "Comparative Analysis of Neural Network and XGBoost AUROC Performance"
X_AXIS_LABEL: str = "Model Comparison Index"
Y_AXIS_LABEL: str = "Deep Learning - XGBoost AUROC"
SERIES_NAME: str = "DL - XGB Performance Difference"
ZERO_LINE_LABEL: str = "Equal Performance"
AVERAGE_BADGE_LABEL: str = "Average Difference (DL - XGB)"

# ------ Chart colours -------
SERIES_COLOR: str = "#3b82f6"
ZERO_LINE_COLOR: str = "#64748b"
AVERAGE_LINE_COLOR: str = "#dc2626"
GRID_COLOR: str = "#e2e8f0"

# ------ Narrative -------
PERFORMANCE_TREND_TEXT: str = (
    "XGBoost shows strongest advantage in early comparisons, with Deep Learning "
    "models closing the gap in later evaluations."
)

# ------ Logging -------
LOG_LEVEL: str = "INFO"
