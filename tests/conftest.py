import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from tzscheduler.auth import CurrentUser, create_access_token
from tzscheduler.database import build_engine, get_db, init_db
from tzscheduler.domain.participants.service import ParticipantService
from tzscheduler.domain.schedules.service import ScheduleService
from tzscheduler.domain.suggestions.service import SuggestionService
from tzscheduler.main import app


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def alice():
    return CurrentUser(id="user-alice", email="alice@example.com")


@pytest.fixture
def bob():
    return CurrentUser(id="user-bob", email="bob@example.com")


@pytest.fixture
def schedules(db):
    return ScheduleService(db)


@pytest.fixture
def participants(db):
    return ParticipantService(db)


@pytest.fixture
def suggestions(db):
    return SuggestionService(db)


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def alice_headers(alice):
    return {"Authorization": f"Bearer {create_access_token(alice.id, alice.email)}"}


@pytest.fixture
def bob_headers(bob):
    return {"Authorization": f"Bearer {create_access_token(bob.id)}"}
