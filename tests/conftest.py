# Copyright (c) 2025 Fernando Guerriero Cardoso da Silva.
# SPDX-License-Identifier: MIT
#

import os

# Safety check to prevent tests from running against production database
os.environ["TESTING"] = "1"
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-volunteer-hub")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Create test database engine and session
TEST_DATABASE_URL = "sqlite:///:memory:"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
    echo=False
)
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

from volunteer_hub.app import app
from volunteer_hub.db import models  # noqa: F401
from volunteer_hub.db.database import Base, get_db
from tests.test_helpers import create_user


@pytest.fixture(name="db_session", scope="function")
def db_session_fixture():
    """
    Creates a new database session for each test, with all tables created.
    """
    Base.metadata.create_all(bind=test_engine)

    db = TestSessionLocal()

    try:
        yield db
    finally:
        db.close()
        # Drop all tables after the test to ensure a clean slate
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture(name="client")
def client_fixture(db_session: Session):
    """
    Provides a FastAPI TestClient that overrides the get_db dependency
    to use the test database session.
    """
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(name="owner")
def owner_fixture(db_session: Session):
    return create_user(db_session, email="owner@example.com", name="Olivia Owner")


@pytest.fixture(name="other_user")
def other_user_fixture(db_session: Session):
    return create_user(db_session, email="other@example.com", name="Oscar Other")
