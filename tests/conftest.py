import os
import tempfile

# Set environment variables BEFORE any imports that might use settings
# Use a temporary directory for test database to avoid permission issues
_test_db_dir = tempfile.mkdtemp()
_test_db_path = os.path.join(_test_db_dir, "test_stable.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_test_db_path}"
os.environ["APP_ENV"] = "test"

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, Session

from stable_api.db.base import enable_sqlite_foreign_keys
from stable_api.main import app
from stable_api.repositories.horse import HorseRepository
from stable_api.repositories.owner import OwnerRepository
from stable_api.services.horse import HorseService
from stable_api.services.owner import OwnerService


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test and run migrations."""
    temp_db_dir = tempfile.mkdtemp()
    test_db_path = os.path.join(temp_db_dir, "test.db")
    test_db_url = f"sqlite:///{test_db_path}"

    test_engine = create_engine(
        test_db_url,
        connect_args={"check_same_thread": False},
    )

    # Enable WAL mode to reduce locking issues
    @event.listens_for(test_engine, "connect")
    def set_sqlite_pragma(dbapi_conn, connection_record):
        cursor = dbapi_conn.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    # Without this SQLite ignores ON DELETE CASCADE
    enable_sqlite_foreign_keys(test_engine)

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

        try:
            if os.path.exists(test_db_path):
                os.remove(test_db_path)
            for suffix in ["-wal", "-shm"]:
                wal_path = f"{test_db_path}{suffix}"
                if os.path.exists(wal_path):
                    os.remove(wal_path)
            if os.path.exists(temp_db_dir):
                os.rmdir(temp_db_dir)
        except OSError as e:
            print(f"Cleanup failed: {e}")


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database dependency override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    from stable_api.api.deps import get_db

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def db(db_session):
    """Alias for db_session to match test naming conventions."""
    return db_session


@pytest.fixture(scope="function")
def owner_service(db: Session) -> OwnerService:
    return OwnerService(OwnerRepository(db))


@pytest.fixture(scope="function")
def horse_service(db: Session, owner_service: OwnerService) -> HorseService:
    return HorseService(HorseRepository(db), owner_service)


@pytest.fixture(scope="function")
def admin_headers() -> dict:
    return {"x-user-role": "admin"}


@pytest.fixture(scope="function")
def vet_headers() -> dict:
    return {"x-user-role": "vet"}


@pytest.fixture(scope="function")
def owner(owner_service: OwnerService) -> dict:
    """Create an owner directly in the database."""
    record = owner_service.create(name="John Doe", email="john.doe@example.com")
    return {"id": record.id, "name": record.name, "email": record.email}


@pytest.fixture(scope="function")
def horse(horse_service: HorseService, owner: dict) -> dict:
    """Create a horse belonging to ``owner``."""
    record = horse_service.create(
        name="Spirit",
        age=5,
        breed="Arabian",
        health_status="HEALTHY",
        owner_id=owner["id"],
    )
    return {
        "id": record.id,
        "name": record.name,
        "age": record.age,
        "breed": record.breed,
        "healthStatus": record.health_status,
        "owner": record.owner_id,
    }
