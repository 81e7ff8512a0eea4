"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tripnest.database import Base, get_db
from tripnest.dependencies.permissions import get_current_user
from tripnest.main import app
from tripnest.models import User
from tripnest.schemas.household import HouseholdCreate
from tripnest.schemas.trip import TripCreate
from tripnest.services.context import RequestContext
from tripnest.services.household_service import HouseholdService
from tripnest.services.trip_service import TripService

# StaticPool so in-memory SQLite shares one connection across sessions
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine."""
    import tripnest.models  # noqa: F401

    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db(test_engine) -> Generator[Session, None, None]:
    """Create a test database session."""
    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db: Session):
    """Factory for users mirrored from Supabase."""
    counter = {"n": 0}

    def _make_user(email: str = None, name: str = None) -> User:
        counter["n"] += 1
        user = User(
            email=email or f"user{counter['n']}@example.com",
            name=name or f"User {counter['n']}",
            supabase_id=f"supabase-{counter['n']}",
            is_active=True,
        )
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_ctx(db: Session):
    def _make_ctx(user: User) -> RequestContext:
        return RequestContext.for_user(db, user)

    return _make_ctx


@pytest.fixture
def owner(make_user) -> User:
    return make_user(email="alex@example.com", name="Alex")


@pytest.fixture
def partner(make_user) -> User:
    return make_user(email="sam@example.com", name="Sam")


@pytest.fixture
def outsider(make_user) -> User:
    return make_user(email="outsider@example.com", name="Outsider")


@pytest.fixture
def household(db: Session, owner: User, make_ctx):
    """Household owned by ``owner``; returns the service result dict."""
    return HouseholdService(db).create_household(
        make_ctx(owner), HouseholdCreate(name="Alex & Sam")
    )


@pytest.fixture
def joined_partner(
    db: Session, household, owner: User, partner: User, make_ctx
) -> User:
    """``partner`` invited into ``household`` and having accepted."""
    service = HouseholdService(db)
    invite = service.invite_partner(make_ctx(owner), partner.email)
    service.accept_invite(make_ctx(partner), invite.invite_token)
    return partner


@pytest.fixture
def make_trip(db: Session, make_ctx):
    """Factory creating a trip through the service as ``user``."""

    def _make_trip(user: User, name="Lisbon", start=None, end=None, **kwargs):
        start = start or date.today() + timedelta(days=10)
        end = end or start + timedelta(days=4)
        return TripService(db).create_trip(
            make_ctx(user),
            TripCreate(
                name=name,
                destination=kwargs.pop("destination", "Lisbon, Portugal"),
                start_date=start,
                end_date=end,
                **kwargs,
            ),
        )

    return _make_trip


class AuthState:
    """Mutable holder for whoever the test client is authenticated as."""

    def __init__(self):
        self.user = None


@pytest.fixture
def auth_state() -> AuthState:
    return AuthState()


@pytest.fixture(scope="function")
def client(db: Session, auth_state: AuthState) -> Generator[TestClient, None, None]:
    """Test client with the database and Supabase auth overridden."""

    def _override_get_db():
        yield db

    async def _override_get_current_user():
        from fastapi import HTTPException, status

        if auth_state.user is None:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Could not validate credentials",
            )
        return auth_state.user

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_current_user] = _override_get_current_user

    yield TestClient(app)

    app.dependency_overrides.clear()
