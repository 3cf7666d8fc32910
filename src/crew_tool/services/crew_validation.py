"""Per-row validation and normalization of crew import rows"""
import re
from datetime import date, datetime, timezone
from typing import Dict, Optional, Tuple

from src.crew_tool.models.profile import CrewStatus
from src.crew_tool.schemas.crew_import import CrewImportRow, ValidationResult

ALLOWED_STATUSES = [s.value for s in CrewStatus]
DEFAULT_STATUS = CrewStatus.PENDING.value

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[\d\s+()\-]+$")

VESSEL_COLUMNS = ("vessel_assignment", "vessel", "vessel_name")
PHONE_COLUMNS = ("phone_number", "phone")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def first_present(row: Dict[str, str], *columns: str) -> str:
    for column in columns:
        value = (row.get(column) or "").strip()
        if value:
            return value
    return ""


def split_full_name(full_name: str) -> Tuple[str, str]:
    """'Maria Garcia Lopez' -> ('Maria', 'Garcia Lopez'); a single token fills both"""
    parts = full_name.strip().split(" ", 1)
    first_name = parts[0]
    last_name = parts[1].strip() if len(parts) > 1 else ""
    return first_name, last_name or first_name


def parse_join_date(value: str) -> Optional[date]:
    try:
        return date.fromisoformat(value)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(value).date()
    except ValueError:
        return None


def normalize_status(value: str) -> Optional[str]:
    for status in ALLOWED_STATUSES:
        if status.lower() == value.lower():
            return status
    return None


def validate_row(
    row: Dict[str, str],
    row_number: int,
    today: Optional[date] = None
) -> ValidationResult:
    errors = []
    warnings = []
    today = today or utc_today()

    first_name = first_present(row, "first_name")
    last_name = first_present(row, "last_name")
    full_name = first_present(row, "full_name")
    if full_name and not first_name and not last_name:
        first_name, last_name = split_full_name(full_name)

    if not first_name:
        errors.append("First name is required")
    if not last_name:
        errors.append("Last name is required")

    email = (row.get("email") or "").strip().lower()
    if not email:
        errors.append("Email is required")
    elif not EMAIL_PATTERN.match(email):
        errors.append("Invalid email format")

    vessel_assignment = first_present(row, *VESSEL_COLUMNS)
    if not vessel_assignment:
        errors.append("Vessel assignment is required")

    rank = first_present(row, "rank")
    position = first_present(row, "position")
    if not rank and not position:
        errors.append("Either rank or position is required")

    phone_number = first_present(row, *PHONE_COLUMNS)
    if phone_number and not PHONE_PATTERN.match(phone_number):
        warnings.append("Phone number format may be invalid")

    join_date_raw = first_present(row, "join_date")
    join_date = today.isoformat()
    if join_date_raw:
        parsed = parse_join_date(join_date_raw)
        if parsed is None:
            errors.append("Invalid join date format (use YYYY-MM-DD)")
            join_date = join_date_raw
        else:
            join_date = parsed.isoformat()
            if parsed > today:
                warnings.append("Join date is in the future")

    status_raw = first_present(row, "status") or DEFAULT_STATUS
    status = normalize_status(status_raw)
    if status is None:
        warnings.append(f"Status should be one of: {', '.join(ALLOWED_STATUSES)}")
        status = DEFAULT_STATUS

    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        row_number=row_number,
        data=CrewImportRow(
            first_name=first_name,
            last_name=last_name,
            email=email,
            phone_number=phone_number or None,
            rank=rank or position or None,
            position=position or rank or None,
            nationality=first_present(row, "nationality") or None,
            vessel_assignment=vessel_assignment,
            join_date=join_date,
            status=status,
            row_number=row_number,
        ),
    )
