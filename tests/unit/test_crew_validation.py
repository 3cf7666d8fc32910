from datetime import date, timedelta

from src.crew_tool.services.crew_validation import (
    parse_join_date,
    split_full_name,
    validate_row,
)

TODAY = date(2026, 3, 1)


def _row(**overrides) -> dict:
    row = {
        "first_name": "John",
        "last_name": "Smith",
        "email": "John.Smith@Example.com ",
        "vessel_assignment": "MV Test",
        "rank": "Chief Engineer",
    }
    row.update(overrides)
    return row


def test_valid_row_is_normalized():
    result = validate_row(_row(), 2, today=TODAY)

    assert result.valid
    assert result.errors == []
    assert result.warnings == []
    assert result.row_number == 2
    assert result.data.email == "john.smith@example.com"
    assert result.data.position == "Chief Engineer"
    assert result.data.join_date == "2026-03-01"
    assert result.data.status == "Pending"


def test_full_name_split_on_first_space():
    result = validate_row(
        {"full_name": "Maria Garcia Lopez", "email": "m@example.com", "vessel": "MV Test", "position": "Cook"},
        2,
        today=TODAY,
    )

    assert result.valid
    assert result.data.first_name == "Maria"
    assert result.data.last_name == "Garcia Lopez"
    assert result.data.rank == "Cook"


def test_single_token_full_name_fills_both_names():
    assert split_full_name("Cher") == ("Cher", "Cher")


def test_explicit_name_columns_win_over_full_name():
    result = validate_row(_row(full_name="Other Person"), 2, today=TODAY)

    assert result.data.first_name == "John"
    assert result.data.last_name == "Smith"


def test_missing_required_fields():
    result = validate_row({"first_name": "", "last_name": "", "email": "", "vessel_assignment": "", "rank": " "}, 5)

    assert not result.valid
    assert result.errors == [
        "First name is required",
        "Last name is required",
        "Email is required",
        "Vessel assignment is required",
        "Either rank or position is required",
    ]


def test_invalid_email_format():
    result = validate_row(_row(email="not-an-email"), 2, today=TODAY)

    assert not result.valid
    assert "Invalid email format" in result.errors


def test_minimal_email_shape_passes():
    result = validate_row(_row(email="a@b.c"), 2, today=TODAY)

    assert result.valid


def test_vessel_column_fallbacks():
    row = _row(vessel_assignment="")
    row["vessel_name"] = "MV Other"

    result = validate_row(row, 2, today=TODAY)

    assert result.data.vessel_assignment == "MV Other"


def test_phone_with_letters_is_a_warning_only():
    result = validate_row(_row(phone="+44 (0) 7700-900000 ext 5"), 2, today=TODAY)

    assert result.valid
    assert result.warnings == ["Phone number format may be invalid"]
    assert result.data.phone_number == "+44 (0) 7700-900000 ext 5"


def test_valid_phone_has_no_warning():
    result = validate_row(_row(phone_number="+1 (555) 012-3456"), 2, today=TODAY)

    assert result.warnings == []


def test_unparseable_join_date_is_an_error():
    result = validate_row(_row(join_date="31/02/2025"), 2, today=TODAY)

    assert not result.valid
    assert "Invalid join date format (use YYYY-MM-DD)" in result.errors


def test_future_join_date_is_a_warning():
    next_year = date.today() + timedelta(days=366)

    result = validate_row(_row(join_date=next_year.isoformat()), 2)

    assert result.valid
    assert "Join date is in the future" in result.warnings
    assert result.data.join_date == next_year.isoformat()


def test_join_date_today_is_not_future():
    result = validate_row(_row(join_date="2026-03-01"), 2, today=TODAY)

    assert result.warnings == []


def test_parse_join_date_accepts_iso_datetime():
    assert parse_join_date("2025-01-15T08:30:00") == date(2025, 1, 15)
    assert parse_join_date("2025-02-30") is None


def test_unknown_status_falls_back_to_pending_with_warning():
    result = validate_row(_row(status="Bogus"), 2, today=TODAY)

    assert result.valid
    assert result.data.status == "Pending"
    assert result.warnings == [
        "Status should be one of: Active, Pending, On Leave, Invited, Inactive"
    ]


def test_status_matches_case_insensitively():
    result = validate_row(_row(status="on leave"), 2, today=TODAY)

    assert result.data.status == "On Leave"
    assert result.warnings == []
