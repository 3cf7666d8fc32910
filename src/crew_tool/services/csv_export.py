"""CSV downloads for the crew import screen"""
import csv
import io
from typing import List

from src.crew_tool.schemas.crew_import import ValidationResult

TEMPLATE_FILENAME = "crew_import_template.csv"
ERRORS_FILENAME = "crew_import_errors.csv"

TEMPLATE_HEADERS = [
    "first_name",
    "last_name",
    "email",
    "phone_number",
    "rank",
    "position",
    "nationality",
    "vessel_assignment",
    "join_date",
    "status",
]

TEMPLATE_SAMPLE_ROWS = [
    ["John", "Smith", "john.smith@example.com", "+44 7700 900000", "Chief Engineer", "Chief Engineer", "British", "VESSEL_NAME_OR_IMO", "2025-01-15", "Active"],
    ["Sarah", "Johnson", "sarah.j@example.com", "+1 555-0123", "Bosun", "Bosun", "American", "VESSEL_NAME_OR_IMO", "2025-02-01", "Pending"],
    ["Maria", "Garcia", "maria.garcia@example.com", "", "Stewardess", "Chief Stewardess", "Spanish", "VESSEL_NAME_OR_IMO", "2025-01-20", "Active"],
]

ERROR_HEADERS = ["row_number", "errors"] + TEMPLATE_HEADERS


def _render(headers: List[str], rows: List[list]) -> str:
    output = io.StringIO()
    csv.writer(output, lineterminator="\n").writerow(headers)
    writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerows(rows)
    return output.getvalue()


def generate_csv_template() -> str:
    return _render(TEMPLATE_HEADERS, TEMPLATE_SAMPLE_ROWS)


def export_error_rows_csv(results: List[ValidationResult]) -> str:
    rows = []
    for r in results:
        if r.valid:
            continue
        data = r.data
        rows.append([
            r.row_number,
            "; ".join(r.errors),
            data.first_name,
            data.last_name,
            data.email,
            data.phone_number or "",
            data.rank or "",
            data.position or "",
            data.nationality or "",
            data.vessel_assignment,
            data.join_date or "",
            data.status or "",
        ])
    return _render(ERROR_HEADERS, rows)
