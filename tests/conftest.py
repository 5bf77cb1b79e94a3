"""
pytest Fixtures for CampusCoffee API Tests

Shared fixtures used across all test files.

FIXTURE SCOPES:
- engine: function scope; every test gets a fresh in-memory database, so
  tests that commit (the review service commits its own transactions)
  cannot leak rows into each other
- db_session: function scope, bound to that engine
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["APPROVAL_MIN_COUNT"] = "2"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from campuscoffee.database import Base, get_db
from campuscoffee.main import app
from campuscoffee.models import CampusType, Pos, PosType, Review, User
from campuscoffee.services.reviews import ReviewApprovalService

MIN_APPROVAL_COUNT = 2

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# StaticPool keeps the single connection alive so the in-memory database
# survives across sessions and the TestClient's worker threads.


@pytest.fixture
def engine():
    """Create a fresh SQLite in-memory database with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    """Create a database session for one test."""
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client with the test database.

    We override the get_db dependency to use our test session.
    """

    def override_get_db():
        """Provide test database session instead of real one."""
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def service(db_session: Session) -> ReviewApprovalService:
    """Review service with an approval quorum of two."""
    return ReviewApprovalService.for_session(db_session, MIN_APPROVAL_COUNT)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


def make_pos(db_session: Session, name: str, campus: CampusType = CampusType.ALTSTADT) -> Pos:
    pos = Pos(
        name=name,
        description=f"Coffee at {name}",
        pos_type=PosType.CAFE.value,
        campus=campus.value,
        street="Hauptstrasse",
        house_number="90",
        postal_code=69117,
        city="Heidelberg",
    )
    db_session.add(pos)
    db_session.commit()
    db_session.refresh(pos)
    return pos


def make_user(db_session: Session, login_name: str) -> User:
    user = User(
        login_name=login_name,
        email_address=f"{login_name}@uni-heidelberg.de",
        first_name=login_name.capitalize(),
        last_name="Tester",
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_pos(db_session: Session) -> Pos:
    """Create a sample POS for testing."""
    return make_pos(db_session, "Schmelzpunkt")


@pytest.fixture
def second_pos(db_session: Session) -> Pos:
    return make_pos(db_session, "Cafe Botanik", CampusType.INF)


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user; authors sample_review."""
    return make_user(db_session, "author")


@pytest.fixture
def second_user(db_session: Session) -> User:
    """Create a second user for approval scenarios."""
    return make_user(db_session, "approver")


@pytest.fixture
def third_user(db_session: Session) -> User:
    return make_user(db_session, "another")


@pytest.fixture
def sample_review(
    db_session: Session,
    sample_pos: Pos,
    sample_user: User,
) -> Review:
    """Create a sample review with no approvals."""
    review = Review(
        pos_id=sample_pos.id,
        author_id=sample_user.id,
        review="Great espresso, friendly staff.",
    )
    db_session.add(review)
    db_session.commit()
    db_session.refresh(review)
    return review
