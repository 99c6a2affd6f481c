"""
Pytest configuration and fixtures for PostPlanner tests.
"""
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from postplanner.database import Base, get_db
from postplanner.main import app
from postplanner.seed import load_sample_data

# Use in-memory SQLite for tests with shared connection
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()

    def get_test_db():
        yield session

    app.dependency_overrides[get_db] = get_test_db

    yield session

    # Cleanup
    app.dependency_overrides.clear()
    session.close()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db):
    """Create a test client (lifespan not run; tables come from the db fixture)."""
    return TestClient(app)


@pytest.fixture(scope="function")
def seeded(db):
    """Database loaded with the sample data set."""
    load_sample_data(db)
    return db
