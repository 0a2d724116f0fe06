"""
Pytest configuration and fixtures.

Provides an in-memory SQLite database shared through ``StaticPool``, a
``TestClient`` with ``get_db`` overridden, seeded companies/jobs and bearer
tokens for an admin and a regular user.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.database import Base, get_db
from jobly.main import app
from jobly.models.company import Company
from jobly.models.job import Job
from jobly.security import create_token

SQLALCHEMY_DATABASE_URL = "sqlite://"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def override_get_db():
    """Dependency override that uses the test in-memory database."""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_db():
    """Create and tear down tables around each test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client():
    """TestClient with the DB dependency overridden."""
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def db():
    """SQLAlchemy session for pre-populating and inspecting test data."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sample_companies(db):
    """Three companies, c1..c3, with 1..3 employees."""
    companies = [
        Company(
            handle=f"c{n}",
            name=f"C{n}",
            description=f"Desc{n}",
            num_employees=n,
            logo_url=f"http://c{n}.img",
        )
        for n in (1, 2, 3)
    ]
    db.add_all(companies)
    db.commit()
    return [company.handle for company in companies]


@pytest.fixture
def sample_jobs(db, sample_companies):
    """Four jobs: two at c1 with equity, one at c2 with zero equity, one at c3 unspecified."""
    jobs = [
        Job(title="J1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="J2", salary=200, equity=0.2, company_handle="c1"),
        Job(title="J3", salary=300, equity=0, company_handle="c2"),
        Job(title="J4", salary=None, equity=None, company_handle="c3"),
    ]
    db.add_all(jobs)
    db.commit()
    return {job.title: job.id for job in jobs}


@pytest.fixture
def admin_headers():
    return {"Authorization": f"Bearer {create_token('admin', is_admin=True)}"}


@pytest.fixture
def user_headers():
    return {"Authorization": f"Bearer {create_token('u1', is_admin=False)}"}
