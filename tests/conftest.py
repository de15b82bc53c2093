# Point the reference service at an in-memory DB before any application or db imports.
import os

os.environ["REFERENCE_DATABASE_URL"] = "sqlite:///:memory:"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import delete

from db import SessionLocal, get_db
from main import app
from models import Base
from models.charge_point import ChargePoint
from utils.config import Settings, load_settings
from utils.errors import ConfigError

_settings_key = pytest.StashKey[Settings]()


def pytest_configure(config):
    """Load and validate settings once, before collection. Bad config stops the run."""
    try:
        config.stash[_settings_key] = load_settings()
    except ConfigError as e:
        raise pytest.UsageError(f"Invalid suite configuration: {e}") from e


@pytest.fixture(scope="session")
def settings(pytestconfig) -> Settings:
    """Validated suite settings."""
    return pytestconfig.stash[_settings_key]


def _get_engine():
    """Engine used by the app (in-memory)."""
    return SessionLocal.kw["bind"]


@pytest.fixture(scope="session")
def engine():
    """One in-memory engine per test run; create tables once."""
    eng = _get_engine()
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db_session(engine):
    """Function-scoped session. Routes commit for real (the in-memory DB is one
    shared connection), so charge_point rows are deleted on teardown.
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        with engine.begin() as connection:
            connection.execute(delete(ChargePoint))


def _override_get_db(session):
    """Return a generator that yields the given session (for dependency override)."""
    def override():
        yield session
    return override


@pytest.fixture
def client(db_session):
    """Reference service test client; overrides get_db to use the test db_session, cleared on teardown."""
    app.dependency_overrides[get_db] = _override_get_db(db_session)
    try:
        with TestClient(app) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
