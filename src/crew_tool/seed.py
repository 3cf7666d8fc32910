"""Seed data for initial setup"""
import os

from sqlalchemy.orm import Session
from sqlalchemy import select

from src.crew_tool.database import SessionLocal
from src.crew_tool.models.account import Account
from src.crew_tool.models.company import Company
from src.crew_tool.models.profile import Profile, ProfileRole, CrewStatus
from src.crew_tool.models.vessel import Vessel
from src.crew_tool.services.accounts import create_account

DEMO_COMPANY_NAME = "Demo Shipping Ltd"
DEMO_VESSELS = [
    ("MV Northern Star", "9321483"),
    ("MV Atlantic Dawn", "9402115"),
]


def create_company(db: Session) -> Company:
    existing = db.execute(
        select(Company).where(Company.name == DEMO_COMPANY_NAME)
    ).scalar_one_or_none()
    
    if existing:
        print("Demo company already exists")
        return existing
    
    company = Company(name=DEMO_COMPANY_NAME)
    db.add(company)
    db.commit()
    db.refresh(company)
    print(f"Created company: {company.name} (ID: {company.id})")
    return company


def create_vessels(db: Session, company: Company) -> list[Vessel]:
    created = []
    for name, imo_number in DEMO_VESSELS:
        existing = db.execute(
            select(Vessel).where(Vessel.company_id == company.id, Vessel.name == name)
        ).scalar_one_or_none()
        
        if existing:
            print(f"Vessel already exists: {name}")
            created.append(existing)
            continue
        
        vessel = Vessel(company_id=company.id, name=name, imo_number=imo_number)
        db.add(vessel)
        db.commit()
        db.refresh(vessel)
        print(f"Created vessel: {name} (IMO {imo_number})")
        created.append(vessel)
    return created


def create_dpa_user(db: Session, company: Company, password: str) -> Profile:
    email = "dpa@example.com"
    account = db.execute(
        select(Account).where(Account.email == email)
    ).scalar_one_or_none()
    
    if account is None:
        account = create_account(db, email, password, email_confirm=True)
    
    profile = db.execute(
        select(Profile).where(Profile.user_id == account.id)
    ).scalar_one_or_none()
    
    if profile:
        print(f"DPA user already exists: {email}")
        return profile
    
    profile = Profile(
        user_id=account.id,
        company_id=company.id,
        email=email,
        first_name="Designated",
        last_name="Person",
        role=ProfileRole.DPA,
        status=CrewStatus.ACTIVE,
    )
    db.add(profile)
    db.commit()
    db.refresh(profile)
    print(f"Created DPA user: {email} (account ID: {account.id})")
    return profile


def run_seed():
    db = SessionLocal()
    try:
        company = create_company(db)
        create_vessels(db, company)
        create_dpa_user(db, company, os.environ.get("SEED_DPA_PASSWORD", "change-me-please"))
        print("Seed completed successfully")
    finally:
        db.close()


if __name__ == "__main__":
    run_seed()
