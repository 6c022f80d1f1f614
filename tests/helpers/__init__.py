"""Test helper utilities."""

from typing import Dict, Iterable, List, Optional, Tuple

CSV_HEADER = "Row Index,Xgboost (AUROC),Neural Net (AUROC),Difference"


def make_csv(rows: Iterable[Tuple], header: str = CSV_HEADER) -> str:
    """Build CSV text from tuples in header order."""
    lines = [header]
    for row in rows:
        lines.append(",".join("" if value is None else str(value) for value in row))
    return "\n".join(lines) + "\n"


class FakeReader:
    """In-memory file reader that records every read."""

    def __init__(self, files: Optional[Dict[str, str]] = None, error: Optional[Exception] = None):
        self.files = dict(files or {})
        self.error = error
        self.reads: List[str] = []

    async def read_text(self, name: str) -> str:
        self.reads.append(name)
        if self.error is not None:
            raise self.error
        try:
            return self.files[name]
        except KeyError:
            raise FileNotFoundError(f"No such file: {name}") from None
