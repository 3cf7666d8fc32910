from datetime import date

from src.crew_tool.models.vessel import Vessel
from src.crew_tool.schemas.crew_import import ImportAction
from src.crew_tool.services.crew_validation import validate_row
from src.crew_tool.services.cross_reference import (
    apply_cross_references,
    build_vessel_mapping,
    match_vessel,
)

FLEET = [
    Vessel(id=10, company_id=1, name="MV Test", imo_number="9876543"),
    Vessel(id=11, company_id=1, name="MV Other", imo_number=None),
]


def _result(email="john@example.com", vessel="MV Test", row_number=2):
    return validate_row(
        {"first_name": "John", "last_name": "Smith", "email": email, "vessel_assignment": vessel, "rank": "AB"},
        row_number,
        today=date(2026, 1, 1),
    )


def test_match_vessel_by_name_case_insensitive():
    assert match_vessel("mv test", FLEET).id == 10


def test_match_vessel_by_imo_number():
    assert match_vessel("9876543", FLEET).id == 10


def test_unknown_vessel_does_not_match():
    assert match_vessel("MV Ghost", FLEET) is None


def test_vessel_mapping_keys_are_lowercased():
    mapping = build_vessel_mapping(["MV Test", "MV OTHER", "9876543", "Nope"], FLEET)

    assert mapping == {"mv test": 10, "mv other": 11, "9876543": 10}


def test_existing_email_is_only_a_warning_when_validating():
    result = _result()

    apply_cross_references([result], {"john@example.com"}, FLEET, ImportAction.VALIDATE)

    assert result.valid
    assert result.warnings == ["Email already exists in system"]
    assert result.errors == []


def test_existing_email_blocks_when_importing():
    result = _result()

    apply_cross_references([result], {"john@example.com"}, FLEET, ImportAction.IMPORT)

    assert not result.valid
    assert result.warnings == ["Email already exists in system"]
    assert result.errors == ["Duplicate email - will be skipped"]


def test_unknown_vessel_blocks_in_both_modes():
    for action in ImportAction:
        result = _result(vessel="MV Ghost")

        mapping = apply_cross_references([result], set(), FLEET, action)

        assert mapping == {}
        assert not result.valid
        assert result.errors == ["Vessel not found: MV Ghost"]


def test_blank_vessel_reports_only_the_required_error():
    result = _result(vessel="")

    apply_cross_references([result], set(), FLEET, ImportAction.VALIDATE)

    assert result.errors == ["Vessel assignment is required"]


def test_mapping_covers_every_distinct_vessel_in_batch():
    results = [_result(vessel="MV Test"), _result(email="b@example.com", vessel="mv test", row_number=3)]

    mapping = apply_cross_references(results, set(), FLEET)

    assert mapping == {"mv test": 10}
    assert all(r.valid for r in results)
