"""
Shared fixtures: an in-memory SQLite database that replaces the real one for
every request, seeded with three companies, four jobs, two users and an admin.
"""
import os

# Must be set before jobly is imported
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobly.main import app
from jobly.core.auth_dependency import get_db
from jobly.core.security import hash_password, create_access_token
from jobly.db.base import Base
from jobly.db.init_db import init_db
from jobly.db.models import Company, Job, User, Application
from jobly.db.session import enable_sqlite_foreign_keys


TEST_DATABASE_URL = "sqlite://"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
enable_sqlite_foreign_keys(test_engine)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override get_db dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[get_db] = override_get_db


@pytest.fixture(scope="function", autouse=True)
def setup_db():
    """Create and drop tables for each test."""
    init_db(test_engine)
    yield
    Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def db_session():
    """Provide a database session for tests."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def seed(db_session):
    """
    c1 (1 employee), c2 (2), c3 (3); jobs j1..j3 at c1, j4 at c3;
    users u1, u2 and admin "a1". u1 has applied to j1.
    """
    db_session.add_all([
        Company(handle="c1", name="C1", num_employees=1, description="Desc1", logo_url="http://c1.img"),
        Company(handle="c2", name="C2", num_employees=2, description="Desc2", logo_url="http://c2.img"),
        Company(handle="c3", name="C3", num_employees=3, description="Desc3", logo_url="http://c3.img"),
    ])
    db_session.commit()

    jobs = [
        Job(title="J1", salary=100, equity=0.1, company_handle="c1"),
        Job(title="J2", salary=200, equity=0.2, company_handle="c1"),
        Job(title="J3", salary=300, equity=0, company_handle="c1"),
        Job(title="J4", salary=None, equity=None, company_handle="c3"),
    ]
    db_session.add_all(jobs)
    db_session.commit()
    job_ids = [job.id for job in jobs]

    db_session.add_all([
        User(username="u1", password=hash_password("password1"), first_name="U1F",
             last_name="U1L", email="user1@user.com", is_admin=False),
        User(username="u2", password=hash_password("password2"), first_name="U2F",
             last_name="U2L", email="user2@user.com", is_admin=False),
        User(username="a1", password=hash_password("password3"), first_name="AF",
             last_name="AL", email="admin@user.com", is_admin=True),
    ])
    db_session.commit()

    db_session.add(Application(username="u1", job_id=job_ids[0]))
    db_session.commit()

    return {"job_ids": job_ids}


@pytest.fixture
def u1_token():
    return create_access_token("u1", False)


@pytest.fixture
def u2_token():
    return create_access_token("u2", False)


@pytest.fixture
def admin_token():
    return create_access_token("a1", True)
