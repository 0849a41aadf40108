"""Shared test fixtures."""

import pytest

from pgconnect import create_service
from pgconnect.users import ensure_users_schema


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "test.db"


@pytest.fixture
def db_service(db_path):
    """Provide a fresh SQLite DatabaseService for each test."""
    service = create_service(f"sqlite:///{db_path}")
    service.connect()
    yield service
    service.close()


@pytest.fixture
def users_service(db_service):
    """A service whose database already has an empty users table."""
    ensure_users_schema(db_service)
    return db_service


@pytest.fixture
def seed_users(users_service):
    """Insert (id, first_name, last_name) rows with explicit ids."""

    def _seed(rows):
        for user_id, first_name, last_name in rows:
            users_service.execute(
                "INSERT INTO users (id, first_name, last_name) VALUES ($1, $2, $3)",
                (user_id, first_name, last_name),
            )

    return _seed
