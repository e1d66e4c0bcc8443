"""
Pytest configuration and fixtures for backend tests.
"""

import os

# Settings are read once at import time: point them at SQLite before the app loads
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["REDIS_URL"] = ""
os.environ["ENVIRONMENT"] = "test"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from rest_api.main import app
from rest_api.models import Base, Brand, Store, User
from shared.infrastructure.db import build_engine, get_db


# SQLite in-memory database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """
    Create a fresh database session for each test.
    Uses SQLite in-memory for isolation.
    """
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """
    Create a test client with database session override.
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
def seed_user(db_session):
    """Create an active user."""
    user = User(name="Ann", email="ann@example.com", phone="+1234567890")
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def seed_store(db_session):
    """Create an active store."""
    store = Store(
        name="Downtown",
        address="1 Main St",
        phone="+1555000111",
        email="downtown@example.com",
    )
    db_session.add(store)
    db_session.commit()
    db_session.refresh(store)
    return store


@pytest.fixture
def seed_brand(db_session):
    """Create an active brand."""
    brand = Brand(
        name="Acme",
        description="Everything for everyone",
        logo="https://cdn.example.com/acme.png",
    )
    db_session.add(brand)
    db_session.commit()
    db_session.refresh(brand)
    return brand


@pytest.fixture
def make_stores(db_session):
    """Factory: create stores with the given statuses, in order."""
    def _make(*statuses: str) -> list[Store]:
        stores = [
            Store(name=f"Store {i}", status=status)
            for i, status in enumerate(statuses, start=1)
        ]
        db_session.add_all(stores)
        db_session.commit()
        for store in stores:
            db_session.refresh(store)
        return stores

    return _make
