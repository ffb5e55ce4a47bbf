import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENCRYPTION_KEY", "test-passphrase")
os.environ.setdefault("APP_ENV", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core import config
from app.core.database import Base, get_db
from app.core.dependency import get_ai_service, get_quote_client
from app.core.rate_limit import limiter
from main import app
from tests.fakes import FakeAIService, FakeQuoteClient


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine):
    TestingSession = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def ai_service():
    return FakeAIService()


@pytest.fixture
def quote_client():
    return FakeQuoteClient()


@pytest.fixture(autouse=True)
def encryption_key(monkeypatch):
    monkeypatch.setattr(config, "ENCRYPTION_KEY", "test-passphrase")


@pytest.fixture
def client(db_session, ai_service, quote_client):
    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_ai_service] = lambda: ai_service
    app.dependency_overrides[get_quote_client] = lambda: quote_client
    limiter.reset()
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
