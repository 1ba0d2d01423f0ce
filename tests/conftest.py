import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_campuscoffee.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["LOG_LEVEL"] = "DEBUG"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from campuscoffee.main import app


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
        poolclass=None,  # Don't use connection pooling for SQLite
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    TestingSessionLocal = sessionmaker(
        autocommit=False, autoflush=False, bind=test_engine
    )

    # Run Alembic migrations to set up the database schema
    alembic_cfg = Config("alembic.ini")
    alembic_cfg.set_main_option("sqlalchemy.url", test_db_url)
    command.upgrade(alembic_cfg, "head")

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        test_engine.dispose()

        # Clean up - remove test database file, WAL files and directory
        for suffix in ["", "-wal", "-shm"]:
            path = f"{test_db_path}{suffix}"
            if os.path.exists(path):
                os.remove(path)
        if os.path.exists(temp_db_dir):
            os.rmdir(temp_db_dir)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from campuscoffee.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture
def pos_payloads() -> list[dict]:
    """Three valid creation payloads with distinct field sets, in wire format."""
    return [
        {
            "name": "Cafeteria Mensa",
            "description": "Main cafeteria in the Mensa building",
            "type": "CAFETERIA",
            "campus": "MAIN",
            "street": "Universitätsstraße",
            "houseNumber": "30",
            "postalCode": 95447,
            "city": "Bayreuth",
        },
        {
            "name": "Lidl Bakery",
            "description": "Bakery section inside the supermarket",
            "type": "BAKERY",
            "campus": "ZAPF",
            "street": "Nürnberger Str.",
            "houseNumber": "38a",
            "postalCode": 95448,
            "city": "Bayreuth",
        },
        {
            "name": "Vending Machine RW",
            "description": "Coffee vending machine next to the lecture hall",
            "type": "VENDING_MACHINE",
            "campus": "WITTELSBACHERRING",
            "street": "Wittelsbacherring",
            "houseNumber": "10",
            "postalCode": 95444,
            "city": "Bayreuth",
        },
    ]
