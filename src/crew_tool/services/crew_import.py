"""Crew CSV import: annotate every row once, then report or provision"""
import enum
import logging
from datetime import date
from typing import Dict, List, Optional, Set, Tuple
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.crew_tool.config import settings
from src.crew_tool.models.account import Account
from src.crew_tool.models.crew_assignment import CrewAssignment
from src.crew_tool.models.profile import Profile, ProfileRole, CrewStatus
from src.crew_tool.schemas.crew_import import (
    ImportAction,
    ImportOutcome,
    ImportRowError,
    ParseResult,
    ValidationResult,
)
from src.crew_tool.services.accounts import (
    AccountProvisioningError,
    create_account,
    delete_account,
)
from src.crew_tool.services.audit import log_action
from src.crew_tool.services.cross_reference import DUPLICATE_EMAIL_ERROR, resolve_cross_references
from src.crew_tool.services.crew_validation import validate_row
from src.crew_tool.services.csv_parser import parse_csv
from src.crew_tool.services.password import generate_password

logger = logging.getLogger(__name__)

IMPORT_SOURCE = "csv_import"
DEFAULT_POSITION = "Crew"


class ProfileProvisioningError(Exception):
    pass


class ProvisioningStage(str, enum.Enum):
    NOT_ATTEMPTED = "not_attempted"
    ACCOUNT_CREATED = "account_created"
    PROFILE_CREATED = "profile_created"
    ASSIGNMENT_CREATED = "assignment_created"
    AUDIT_LOGGED = "audit_logged"


def annotate_csv(
    db: Session,
    csv_content: str,
    company_id: int,
    action: ImportAction
) -> Tuple[List[ValidationResult], Dict[str, int], Set[str]]:
    rows = parse_csv(csv_content)
    if not rows:
        raise ValueError("No valid rows found in CSV")

    # first data row is line 2 of the file
    results = [validate_row(row, index + 2) for index, row in enumerate(rows)]
    vessel_mapping, existing_emails = resolve_cross_references(db, company_id, results, action)
    return results, vessel_mapping, existing_emails


def summarize(results: List[ValidationResult], vessel_mapping: Dict[str, int]) -> ParseResult:
    valid_rows = sum(1 for r in results if r.valid)
    return ParseResult(
        results=results,
        total_rows=len(results),
        valid_rows=valid_rows,
        error_rows=len(results) - valid_rows,
        warning_rows=sum(1 for r in results if r.warnings),
        vessel_mapping=vessel_mapping,
    )


def validate_crew_csv(db: Session, csv_content: str, company_id: int) -> ParseResult:
    results, vessel_mapping, _ = annotate_csv(db, csv_content, company_id, ImportAction.VALIDATE)
    summary = summarize(results, vessel_mapping)
    logger.info(
        f"CSV parsed: {summary.valid_rows} valid, {summary.error_rows} errors, "
        f"{summary.warning_rows} warnings"
    )
    return summary


def create_profile(db: Session, account: Account, result: ValidationResult, company_id: int) -> Profile:
    data = result.data
    profile = Profile(
        user_id=account.id,
        company_id=company_id,
        email=data.email,
        first_name=data.first_name,
        last_name=data.last_name,
        phone=data.phone_number,
        nationality=data.nationality,
        rank=data.rank,
        role=ProfileRole.CREW,
        status=CrewStatus(data.status),
    )
    try:
        db.add(profile)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise ProfileProvisioningError(f"Failed to create profile: {e}") from e
    db.refresh(profile)
    return profile


def create_assignment(db: Session, account: Account, result: ValidationResult, vessel_id: int) -> CrewAssignment:
    data = result.data
    assignment = CrewAssignment(
        user_id=account.id,
        vessel_id=vessel_id,
        position=data.position or data.rank or DEFAULT_POSITION,
        join_date=date.fromisoformat(data.join_date),
        is_current=True,
    )
    db.add(assignment)
    db.commit()
    return assignment


def provision_crew_member(
    db: Session,
    result: ValidationResult,
    vessel_id: int,
    actor: Profile,
    password_length: Optional[int] = None
) -> ProvisioningStage:
    """Create account, profile, assignment and audit entry for one valid row.

    Raises AccountProvisioningError when no account could be created and
    ProfileProvisioningError when the profile insert failed; in the latter case
    the account has already been deleted again. A failed assignment or audit
    write is logged and the row still counts as created. Returns the last
    stage reached in order; AUDIT_LOGGED only when every step succeeded.
    """
    data = result.data
    password = generate_password(password_length or settings.GENERATED_PASSWORD_LENGTH)

    account = create_account(db, data.email, password, email_confirm=True)
    stage = ProvisioningStage.ACCOUNT_CREATED

    try:
        profile = create_profile(db, account, result, actor.company_id)
    except ProfileProvisioningError:
        logger.warning(f"Row {result.row_number}: profile insert failed, removing account {account.id}")
        try:
            delete_account(db, account.id)
        except SQLAlchemyError:
            db.rollback()
            logger.exception(f"Row {result.row_number}: could not remove account {account.id}")
        raise
    stage = ProvisioningStage.PROFILE_CREATED

    # TODO: confirm with product whether a failed assignment should skip the row
    try:
        create_assignment(db, account, result, vessel_id)
        stage = ProvisioningStage.ASSIGNMENT_CREATED
    except (SQLAlchemyError, ValueError):
        db.rollback()
        logger.exception(f"Row {result.row_number}: crew assignment for {data.email} failed")

    try:
        log_action(
            db=db,
            actor=actor,
            action="CREW_MEMBER_CREATED",
            target_type="profile",
            target_id=profile.id,
            meta={
                "email": data.email,
                "first_name": data.first_name,
                "last_name": data.last_name,
                "rank": data.rank,
                "position": data.position,
                "nationality": data.nationality,
                "phone": data.phone_number,
                "status": data.status,
                "vessel_id": vessel_id,
                "join_date": data.join_date,
                "row_number": result.row_number,
                "source": IMPORT_SOURCE,
            }
        )
        # A missing assignment stays the reported stage even when the audit entry lands
        if stage == ProvisioningStage.ASSIGNMENT_CREATED:
            stage = ProvisioningStage.AUDIT_LOGGED
    except SQLAlchemyError:
        db.rollback()
        logger.exception(f"Row {result.row_number}: audit log entry for {data.email} failed")

    return stage


def import_crew_csv(db: Session, csv_content: str, actor: Profile) -> ImportOutcome:
    results, vessel_mapping, existing_emails = annotate_csv(
        db, csv_content, actor.company_id, ImportAction.IMPORT
    )

    created = 0
    skipped = 0
    errors = []

    for result in results:
        if not result.valid:
            skipped += 1
            errors.extend(ImportRowError(row=result.row_number, error=e) for e in result.errors)
            continue

        email = result.data.email
        if email in existing_emails:
            skipped += 1
            errors.append(ImportRowError(row=result.row_number, error=DUPLICATE_EMAIL_ERROR))
            continue

        vessel_id = vessel_mapping[result.data.vessel_assignment.lower()]
        try:
            stage = provision_crew_member(db, result, vessel_id, actor)
        except (AccountProvisioningError, ProfileProvisioningError) as e:
            skipped += 1
            errors.append(ImportRowError(row=result.row_number, error=str(e)))
            continue

        if stage != ProvisioningStage.AUDIT_LOGGED:
            logger.warning(
                f"Row {result.row_number}: {email} created but provisioning stopped at {stage.value}"
            )

        created += 1
        existing_emails.add(email)

    logger.info(f"Crew import finished: {created} created, {skipped} skipped, {len(errors)} errors")

    return ImportOutcome(created=created, skipped=skipped, errors=errors)
