import csv
import io
from datetime import date

from src.crew_tool.services.crew_validation import validate_row
from src.crew_tool.services.csv_export import (
    TEMPLATE_HEADERS,
    export_error_rows_csv,
    generate_csv_template,
)
from src.crew_tool.services.csv_parser import parse_csv


def test_template_has_headers_and_three_quoted_samples():
    template = generate_csv_template()
    lines = template.strip().split("\n")

    assert lines[0].split(",") == TEMPLATE_HEADERS
    assert len(lines) == 4
    assert '"John"' in template
    assert '"john.smith@example.com"' in template


def test_template_is_accepted_by_the_parser():
    rows = parse_csv(generate_csv_template())

    assert len(rows) == 3
    assert rows[0]["vessel_assignment"] == "VESSEL_NAME_OR_IMO"
    assert rows[0]["phone_number"] == "+44 7700 900000"


def test_error_export_contains_only_invalid_rows():
    today = date(2026, 1, 1)
    valid = validate_row(
        {"first_name": "A", "last_name": "B", "email": "a@b.co", "vessel_assignment": "MV Test", "rank": "AB"},
        2, today=today,
    )
    invalid = validate_row(
        {"first_name": "", "last_name": "B", "email": "bad", "vessel_assignment": "MV Test", "rank": "AB"},
        3, today=today,
    )

    exported = list(csv.reader(io.StringIO(export_error_rows_csv([valid, invalid]))))

    assert exported[0][:3] == ["row_number", "errors", "first_name"]
    assert len(exported) == 2
    assert exported[1][0] == "3"
    assert exported[1][1] == "First name is required; Invalid email format"


def test_error_export_without_errors_is_header_only():
    assert export_error_rows_csv([]).strip().count("\n") == 0
