"""Configuration models and data structures."""

from dataclasses import dataclass
from pathlib import Path

from config.config import DATA_DIR, DIFF_CSV_NAME, FILE_ENCODING, MISMATCH_TOLERANCE


@dataclass(frozen=True)
class DashboardConfig:
    """Configuration for the AUROC difference panel."""
    data_dir: Path = DATA_DIR
    file_name: str = DIFF_CSV_NAME
    encoding: str = FILE_ENCODING
    mismatch_tolerance: float = MISMATCH_TOLERANCE

    @property
    def file_path(self) -> Path:
        return Path(self.data_dir) / self.file_name

    @classmethod
    def from_defaults(cls, **overrides) -> "DashboardConfig":
        """Build a config from project constants, replacing any given fields."""
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if "data_dir" in overrides:
            overrides["data_dir"] = Path(overrides["data_dir"])
        return cls(**overrides)
