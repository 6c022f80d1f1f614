"""
Parse the comparison CSV into raw rows plus a separate list of parse issues.

Parsing is best-effort: malformed rows are reported and kept with whatever
values could be read, so one bad line never aborts the batch.
"""

import csv
from io import StringIO
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd

from config.config import NUMERIC_COLUMNS, REQUIRED_COLUMNS, ROW_INDEX_COL
from config.schemas import ParseIssue, ParseResult, RawRow
from utils.logging import get_logger

logger = get_logger(__name__)

BOM = "\ufeff"


def _is_blank_line(fields: List[str]) -> bool:
    return not fields or (len(fields) == 1 and not fields[0].strip())


def _tokenize(text: str, issues: List[ParseIssue]) -> Tuple[List[str], List[List[str]]]:
    """
    Split text into a header and data rows of exactly the header's width.

    Short rows are padded with empty values and long rows truncated; both
    are recorded as issues.
    """
    reader = csv.reader(StringIO(text))
    header: List[str] = []
    rows: List[List[str]] = []

    try:
        for fields in reader:
            if _is_blank_line(fields):
                continue
            if not header:
                header = [name.lstrip(BOM) if i == 0 else name for i, name in enumerate(fields)]
                continue

            width = len(header)
            if len(fields) != width:
                issues.append(ParseIssue(
                    row_number=len(rows),
                    column=None,
                    message=(
                        f"line {reader.line_num} has {len(fields)} fields, expected {width}"
                        + (f"; dropped extra values {fields[width:]}" if len(fields) > width else "")
                    ),
                ))
                fields = (fields + [""] * width)[:width]
            rows.append(fields)
    except csv.Error as e:
        issues.append(ParseIssue(None, None, f"stopped reading at line {reader.line_num}: {e}"))

    return header, rows


def _convert(series: pd.Series) -> pd.Series:
    """Turn numeric-looking values into numbers and blanks into missing values."""
    stripped = series.str.strip()
    blank = stripped == ""
    coerced = pd.to_numeric(stripped.mask(blank), errors="coerce")
    converted = coerced.astype(object).where(coerced.notna(), series)
    return converted.mask(blank)


def _check_numeric(df: pd.DataFrame, column: str, issues: List[ParseIssue]) -> None:
    """Record missing required values and non-numeric values in ``column``."""
    values = df[column]
    missing = values.isna()
    numeric = pd.to_numeric(values, errors="coerce")

    if column in REQUIRED_COLUMNS:
        for position in np.flatnonzero(missing.to_numpy()):
            issues.append(ParseIssue(int(position), column, "missing value, using 0"))

    rejected = ~missing & numeric.isna()
    for position in np.flatnonzero(rejected.to_numpy()):
        issues.append(ParseIssue(
            int(position),
            column,
            f"non-numeric value {values.iloc[position]!r}",
        ))

    infinite = np.isinf(numeric.to_numpy(dtype=float))
    for position in np.flatnonzero(infinite):
        issues.append(ParseIssue(
            int(position),
            column,
            f"non-finite value {values.iloc[position]!r}",
        ))

    # Non-numeric and non-finite values are treated as missing from here on
    usable = numeric.notna() & ~infinite
    df[column] = numeric.astype(object).where(usable, None)


def _to_native(value: Any) -> Any:
    """Unbox numpy scalars so rows only carry plain Python values."""
    if isinstance(value, np.generic):
        return value.item()
    return value


def _records(df: pd.DataFrame) -> List[RawRow]:
    rows: List[RawRow] = []
    for record in df.to_dict(orient="records"):
        rows.append({
            str(key): _to_native(value)
            for key, value in record.items()
            if value is not None and not (isinstance(value, float) and np.isnan(value))
        })
    return rows


def parse_csv(text: str) -> ParseResult:
    """
    Parse delimited text with a header row.

    Args:
        text: Full CSV content

    Returns:
        ParseResult with one raw row per non-empty data line (header keys,
        numeric-looking fields as numbers, missing values omitted) and every
        issue found along the way. ``ParseIssue.row_number`` is the
        zero-based position of the row in ``rows``, or None for file-level
        problems.
    """
    issues: List[ParseIssue] = []

    if not text or not text.strip():
        logger.info("Comparison file is empty; no rows parsed")
        return ParseResult()

    header, raw_rows = _tokenize(text, issues)

    for column in REQUIRED_COLUMNS:
        if column not in header:
            issues.append(ParseIssue(None, column, "required column missing, using 0 for every row"))

    rows: List[RawRow] = []
    if header and raw_rows:
        df = pd.DataFrame(raw_rows, columns=header, dtype=object)
        # Duplicate header names keep the first column, as a dict lookup would
        df = df.loc[:, ~df.columns.duplicated()]
        df = df.apply(_convert)

        for column in (ROW_INDEX_COL, *NUMERIC_COLUMNS):
            if column in df.columns:
                _check_numeric(df, column, issues)

        rows = _records(df)

    for issue in issues:
        logger.warning(f"CSV parsing error - {issue}")
    logger.info(f"Parsed {len(rows)} rows with {len(issues)} parse errors")

    return ParseResult(rows=tuple(rows), issues=tuple(issues))


def summarize_issues(issues: Iterable[ParseIssue]) -> Dict[str, int]:
    """Count issues per column ("other" for issues not tied to a column)."""
    counts: Dict[str, int] = {}
    for issue in issues:
        key = issue.column or "other"
        counts[key] = counts.get(key, 0) + 1
    return counts
