import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-access-token-secret")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.crew_tool.database import get_db
from src.crew_tool.main import app
from src.crew_tool.models import Base, Company, Account, Profile, ProfileRole, CrewStatus, Vessel
from src.crew_tool.services.access_token import issue_access_token
from src.crew_tool.services.password import hash_password

CALLER_PASSWORD = "harbour-pilot-42"


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture()
def company(db) -> Company:
    company = Company(name="Test Shipping")
    db.add(company)
    db.commit()
    return company


@pytest.fixture()
def vessels(db, company) -> list[Vessel]:
    fleet = [
        Vessel(company_id=company.id, name="MV Test", imo_number="9876543"),
        Vessel(company_id=company.id, name="MV Other", imo_number="9123456"),
    ]
    db.add_all(fleet)
    db.commit()
    return fleet


def make_member(db, company: Company, email: str, role: ProfileRole) -> Profile:
    account = Account(email=email, password_hash=hash_password(CALLER_PASSWORD), is_active=True)
    db.add(account)
    db.commit()
    profile = Profile(
        user_id=account.id,
        company_id=company.id,
        email=email,
        first_name="Test",
        last_name=role.value,
        role=role,
        status=CrewStatus.ACTIVE,
    )
    db.add(profile)
    db.commit()
    return profile


@pytest.fixture()
def dpa(db, company) -> Profile:
    return make_member(db, company, "dpa@fleet.example", ProfileRole.DPA)


@pytest.fixture()
def auth_headers(dpa) -> dict:
    return {"Authorization": f"Bearer {issue_access_token(dpa.user_id)}"}


@pytest.fixture()
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def member_factory(db):
    def factory(company: Company, email: str, role: ProfileRole = ProfileRole.CREW) -> Profile:
        return make_member(db, company, email, role)
    return factory


@pytest.fixture()
def caller_password() -> str:
    return CALLER_PASSWORD
