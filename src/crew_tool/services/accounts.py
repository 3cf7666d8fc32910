"""Account provisioning: create and delete login identities"""
import logging
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.crew_tool.models.account import Account
from src.crew_tool.services.password import hash_password, verify_password

logger = logging.getLogger(__name__)


class AccountProvisioningError(Exception):
    pass


def create_account(
    db: Session,
    email: str,
    password: str,
    email_confirm: bool = True
) -> Account:
    existing = db.execute(
        select(Account).where(Account.email == email)
    ).scalar_one_or_none()
    if existing:
        raise AccountProvisioningError(
            "Failed to create user: A user with this email address has already been registered"
        )

    account = Account(
        email=email,
        password_hash=hash_password(password),
        email_confirmed_at=datetime.now(timezone.utc) if email_confirm else None,
        is_active=True,
    )
    try:
        db.add(account)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise AccountProvisioningError(f"Failed to create user: {e}") from e

    db.refresh(account)
    logger.info(f"Created account {account.id} for {email}")
    return account


def delete_account(db: Session, account_id: int) -> None:
    account = db.get(Account, account_id)
    if account is None:
        return
    db.delete(account)
    db.commit()
    logger.info(f"Deleted account {account_id}")


def authenticate(db: Session, email: str, password: str) -> Optional[Account]:
    account = db.execute(
        select(Account).where(Account.email == email.strip().lower(), Account.is_active == True)
    ).scalar_one_or_none()
    if not account or not verify_password(password, account.password_hash):
        return None
    return account
