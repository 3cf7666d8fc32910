"""Batch-wide checks: existing accounts and vessel registry lookups"""
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple
from sqlalchemy import select
from sqlalchemy.orm import Session

from src.crew_tool.models.profile import Profile
from src.crew_tool.models.vessel import Vessel
from src.crew_tool.schemas.crew_import import ImportAction, ValidationResult

EMAIL_EXISTS_WARNING = "Email already exists in system"
DUPLICATE_EMAIL_ERROR = "Duplicate email - will be skipped"


def find_existing_emails(db: Session, company_id: int, emails: Iterable[str]) -> Set[str]:
    emails = list(set(emails))
    if not emails:
        return set()
    existing = db.execute(
        select(Profile.email).where(
            Profile.company_id == company_id,
            Profile.email.in_(emails),
        )
    ).scalars().all()
    return set(existing)


def load_company_vessels(db: Session, company_id: int) -> List[Vessel]:
    return list(db.execute(
        select(Vessel).where(Vessel.company_id == company_id).order_by(Vessel.id)
    ).scalars().all())


def match_vessel(name: str, vessels: Sequence[Vessel]) -> Optional[Vessel]:
    """Match by display name (case-insensitive) first, then by IMO number"""
    wanted = name.strip().lower()
    for vessel in vessels:
        if vessel.name.strip().lower() == wanted:
            return vessel
    for vessel in vessels:
        if vessel.imo_number and vessel.imo_number.strip().lower() == wanted:
            return vessel
    return None


def build_vessel_mapping(names: Iterable[str], vessels: Sequence[Vessel]) -> Dict[str, int]:
    mapping = {}
    for name in names:
        if not name:
            continue
        vessel = match_vessel(name, vessels)
        if vessel:
            mapping[name.lower()] = vessel.id
    return mapping


def apply_cross_references(
    results: List[ValidationResult],
    existing_emails: Set[str],
    vessels: Sequence[Vessel],
    action: ImportAction = ImportAction.VALIDATE
) -> Dict[str, int]:
    """Annotate results in place and return the vessel name -> vessel id mapping"""
    for result in results:
        if result.data.email and result.data.email in existing_emails:
            result.warnings.append(EMAIL_EXISTS_WARNING)
            if action == ImportAction.IMPORT:
                result.errors.append(DUPLICATE_EMAIL_ERROR)
                result.valid = False

    vessel_names = dict.fromkeys(r.data.vessel_assignment for r in results)
    vessel_mapping = build_vessel_mapping(vessel_names, vessels)

    for result in results:
        name = result.data.vessel_assignment
        if name and name.lower() not in vessel_mapping:
            result.errors.append(f"Vessel not found: {name}")
            result.valid = False

    return vessel_mapping


def resolve_cross_references(
    db: Session,
    company_id: int,
    results: List[ValidationResult],
    action: ImportAction = ImportAction.VALIDATE
) -> Tuple[Dict[str, int], Set[str]]:
    emails = [r.data.email for r in results if r.data.email]
    existing_emails = find_existing_emails(db, company_id, emails)
    vessels = load_company_vessels(db, company_id)
    vessel_mapping = apply_cross_references(results, existing_emails, vessels, action)
    return vessel_mapping, existing_emails
