"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Seeded companies, jobs, technologies and users
- Bearer headers for an admin and a regular user
"""

import os

# Must be set before the application modules read their settings
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
os.environ.setdefault("BCRYPT_WORK_FACTOR", "4")
os.environ.setdefault("JSON_LOGS", "false")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.core.database import Base, get_db
from jobly.core.security import create_access_token
from jobly.crud import association
from jobly.crud import company as company_crud
from jobly.crud import job as job_crud
from jobly.crud import technology as technology_crud
from jobly.crud import user as user_crud
from jobly.schemas.company import CompanyNewRequest
from jobly.schemas.job import JobNewRequest
from jobly.schemas.technology import TechnologyNewRequest
from main import app


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database for each test.
    Tables are dropped after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def seeded(db_session):
    """
    Three companies, three jobs (all at c1), two technologies and two users.

    Returns the generated ids so tests do not depend on autoincrement values.
    """
    for n in (1, 2, 3):
        company_crud.create(db_session, CompanyNewRequest(
            handle=f"c{n}",
            name=f"C{n}",
            description=f"Desc{n}",
            num_employees=n,
            logo_url=f"http://c{n}.img",
        ))

    jobs = [
        job_crud.create(db_session, JobNewRequest(title="J1", salary=1, equity=0.1, company_handle="c1")),
        job_crud.create(db_session, JobNewRequest(title="J2", salary=2, equity=0.2, company_handle="c1")),
        job_crud.create(db_session, JobNewRequest(title="J3", salary=3, equity=0, company_handle="c1")),
    ]

    technologies = [
        technology_crud.create(db_session, TechnologyNewRequest(name="Python")),
        technology_crud.create(db_session, TechnologyNewRequest(name="PostgreSQL")),
    ]

    user_crud.register(
        db_session,
        username="u1",
        password="password1",
        first_name="U1F",
        last_name="U1L",
        email="user1@example.com",
    )
    user_crud.register(
        db_session,
        username="admin",
        password="password2",
        first_name="AdF",
        last_name="AdL",
        email="admin@example.com",
        is_admin=True,
    )

    return {
        "job_ids": [j.id for j in jobs],
        "tech_ids": [t.id for t in technologies],
    }


@pytest.fixture
def admin_headers():
    """Bearer header for an admin token"""
    return {"Authorization": f"Bearer {create_access_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers():
    """Bearer header for the regular user u1"""
    return {"Authorization": f"Bearer {create_access_token('u1', is_admin=False)}"}


@pytest.fixture
def enforce_foreign_keys(db_session):
    """
    Turn on SQLite foreign key enforcement for one test.

    The in-memory connection is shared across tests, so it is switched off again afterwards.
    """
    db_session.execute(text("PRAGMA foreign_keys=ON"))
    yield
    db_session.rollback()
    db_session.execute(text("PRAGMA foreign_keys=OFF"))


@pytest.fixture
def racing_link(monkeypatch):
    """
    Make the duplicate pre-check miss once, as if a concurrent request
    inserted the same pair between the check and the insert.
    """
    real_is_linked = association.is_linked
    calls = []

    def is_linked(*args):
        calls.append(args)
        return len(calls) > 1 and real_is_linked(*args)

    monkeypatch.setattr(association, "is_linked", is_linked)
    return calls
