"""Tests for CSV parsing into raw rows and parse issues."""

from comparison.parser import parse_csv, summarize_issues
from tests.helpers import CSV_HEADER, make_csv


def test_parse_typed_rows(sample_csv_text):
    """Numeric-looking fields come back as numbers keyed by header."""
    result = parse_csv(sample_csv_text)

    assert result.error_count == 0
    assert len(result.rows) == 2

    first = result.rows[0]
    assert first["Row Index"] == 0
    assert isinstance(first["Row Index"], int)
    assert first["Xgboost (AUROC)"] == 0.90
    assert first["Neural Net (AUROC)"] == 0.85
    assert first["Difference"] == 0.05


def test_parse_preserves_order():
    text = make_csv([(7, 0.5, 0.6, -0.1), (3, 0.6, 0.5, 0.1), (5, 0.7, 0.7, 0.0)])
    result = parse_csv(text)
    assert [row["Row Index"] for row in result.rows] == [7, 3, 5]


def test_empty_lines_are_skipped():
    text = CSV_HEADER + "\n\n0,0.9,0.8,0.1\n\n\n1,0.7,0.8,-0.1\n\n"
    result = parse_csv(text)

    assert len(result.rows) == 2
    assert result.error_count == 0


def test_empty_and_header_only_text(header_only_csv):
    assert parse_csv("").rows == ()
    assert parse_csv("   \n\n").rows == ()

    result = parse_csv(header_only_csv)
    assert result.rows == ()
    assert result.issues == ()


def test_non_numeric_auroc_is_reported_and_dropped():
    text = make_csv([(0, "n/a", 0.85, 0.05), (1, 0.80, 0.95, -0.15)])
    result = parse_csv(text)

    assert len(result.rows) == 2
    assert "Xgboost (AUROC)" not in result.rows[0]
    assert result.rows[1]["Xgboost (AUROC)"] == 0.80

    assert result.error_count == 1
    issue = result.issues[0]
    assert issue.row_number == 0
    assert issue.column == "Xgboost (AUROC)"
    assert "n/a" in issue.message


def test_infinite_auroc_is_reported_and_dropped():
    text = make_csv([(0, 0.9, 0.85, 0.05), (1, "inf", 0.5, -0.5)])
    result = parse_csv(text)

    assert len(result.rows) == 2
    assert "Xgboost (AUROC)" not in result.rows[1]
    assert result.rows[1]["Neural Net (AUROC)"] == 0.5

    assert result.error_count == 1
    issue = result.issues[0]
    assert issue.row_number == 1
    assert issue.column == "Xgboost (AUROC)"
    assert "non-finite" in issue.message


def test_missing_required_column_is_one_issue():
    text = make_csv([(0, 0.9, 0.05), (1, 0.8, -0.15)], header="Row Index,Xgboost (AUROC),Difference")
    result = parse_csv(text)

    assert len(result.rows) == 2
    assert all("Neural Net (AUROC)" not in row for row in result.rows)

    assert result.error_count == 1
    assert result.issues[0].row_number is None
    assert result.issues[0].column == "Neural Net (AUROC)"


def test_blank_required_value_is_reported():
    text = make_csv([(0, 0.9, None, 0.05)])
    result = parse_csv(text)

    assert "Neural Net (AUROC)" not in result.rows[0]
    assert [(i.row_number, i.column) for i in result.issues] == [(0, "Neural Net (AUROC)")]


def test_blank_optional_value_is_not_an_issue():
    text = make_csv([(None, 0.9, 0.85, None)])
    result = parse_csv(text)

    assert result.issues == ()
    assert result.rows[0] == {"Xgboost (AUROC)": 0.9, "Neural Net (AUROC)": 0.85}


def test_too_many_fields_keeps_leading_values():
    text = CSV_HEADER + "\n0,0.9,0.85,0.05,extra,more\n1,0.8,0.95,-0.15\n"
    result = parse_csv(text)

    assert len(result.rows) == 2
    assert result.rows[0]["Xgboost (AUROC)"] == 0.9
    assert result.rows[0]["Neural Net (AUROC)"] == 0.85
    assert result.error_count == 1
    assert result.issues[0].row_number == 0
    assert "expected 4" in result.issues[0].message
    assert "extra" in result.issues[0].message


def test_too_few_fields_pads_with_missing_values():
    text = CSV_HEADER + "\n0,0.9\n"
    result = parse_csv(text)

    assert len(result.rows) == 1
    assert result.rows[0] == {"Row Index": 0, "Xgboost (AUROC)": 0.9}
    # One for the short line, one for the missing Neural Net value
    assert result.error_count == 2


def test_extra_columns_and_text_fields_survive():
    text = "Row Index,Xgboost (AUROC),Neural Net (AUROC),Difference,Dataset\n0,0.9,0.85,0.05,adult\n"
    result = parse_csv(text)

    assert result.rows[0]["Dataset"] == "adult"
    assert result.error_count == 0


def test_quoted_fields_and_byte_order_mark():
    text = "\ufeff" + CSV_HEADER + '\n"0","0.9","0.85","0.05"\n'
    result = parse_csv(text)

    assert result.rows[0]["Row Index"] == 0
    assert result.rows[0]["Xgboost (AUROC)"] == 0.9


def test_parse_is_deterministic(sample_csv_text):
    assert parse_csv(sample_csv_text) == parse_csv(sample_csv_text)


def test_summarize_issues():
    text = make_csv([(0, "x", "y", 0.1), (1, "z", 0.5, 0.1)], header="Row Index,Xgboost (AUROC),Neural Net (AUROC),Difference")
    text += "2,0.5\n"
    counts = summarize_issues(parse_csv(text).issues)

    assert counts["Xgboost (AUROC)"] == 2
    assert counts["Neural Net (AUROC)"] == 2
    assert counts["other"] == 1
