"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from rentatool.api.main import create_app
from rentatool.infrastructure.database.models import Base
from rentatool.infrastructure.database.session import get_db
from rentatool.infrastructure.database.repositories import seed_default_tools
from rentatool.domain.catalog import chainsaw, ladder, jackhammer
from rentatool.domain.models import Tool


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database seeded with the default inventory"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    seed_default_tools(db)
    db.commit()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db: Session) -> TestClient:
    """Create FastAPI test client with test database"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def chns() -> Tool:
    return chainsaw("CHNS", "Stihl")


@pytest.fixture
def ladw() -> Tool:
    return ladder("LADW", "Werner")


@pytest.fixture
def jakd() -> Tool:
    return jackhammer("JAKD", "DeWalt")


@pytest.fixture
def jakr() -> Tool:
    return jackhammer("JAKR", "Ridgid")


@pytest.fixture
def june_first() -> date:
    """Wednesday, 06/01/22"""
    return date(2022, 6, 1)
