"""Statements against the users table."""

import logging
from dataclasses import dataclass

from pgconnect.service import DatabaseService

logger = logging.getLogger(__name__)

USERS_DDL = {
    "postgresql": """
CREATE TABLE IF NOT EXISTS users (
    id          INTEGER GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
    first_name  TEXT NOT NULL,
    last_name   TEXT NOT NULL
);
""",
    "sqlite": """
CREATE TABLE IF NOT EXISTS users (
    id          INTEGER PRIMARY KEY AUTOINCREMENT,
    first_name  TEXT NOT NULL,
    last_name   TEXT NOT NULL
);
""",
}

SELECT_ALL_USERS = "SELECT id, first_name, last_name FROM users"
INSERT_USER = "INSERT INTO users (first_name, last_name) VALUES ($1, $2)"
UPDATE_FIRST_NAME = "UPDATE users SET first_name = $1 WHERE id = $2"
SELECT_USER_BY_ID = "SELECT id, first_name, last_name FROM users WHERE id = $1"
DELETE_USER = "DELETE FROM users WHERE id = $1"

SEPARATOR = "-" * 36


@dataclass(frozen=True)
class User:
    id: int
    first_name: str
    last_name: str


def ensure_users_schema(service: DatabaseService) -> None:
    """Create the users table if it doesn't exist."""
    try:
        ddl = USERS_DDL[service.dialect]
    except KeyError:
        raise ValueError(f"No users schema for dialect {service.dialect!r}") from None
    service.execute_ddl(ddl)


def get_all_rows(service: DatabaseService) -> list[User]:
    """Print every user as ``Record is <id> <first> <last>`` and return them.

    Errors are logged and re-raised; the caller decides whether to abort.
    """
    users: list[User] = []
    try:
        with service.query(SELECT_ALL_USERS) as rows:
            for user_id, first_name, last_name in rows:
                user = User(user_id, first_name, last_name)
                users.append(user)
                print("Record is", user.id, user.first_name, user.last_name)
    except Exception as e:
        logger.error("Error reading users: %s", e)
        raise

    print(SEPARATOR)
    return users


def insert_user(service: DatabaseService, first_name: str, last_name: str) -> int:
    count = service.execute(INSERT_USER, (first_name, last_name))
    logger.info("Inserted a row! (%d affected)", count)
    return count


def update_first_name(service: DatabaseService, user_id: int, first_name: str) -> int:
    count = service.execute(UPDATE_FIRST_NAME, (first_name, user_id))
    logger.info("Updated one or more rows! (%d affected)", count)
    return count


def get_user(service: DatabaseService, user_id: int) -> User:
    """Fetch exactly one user by id. Raises LookupError if no row matches."""
    user_id, first_name, last_name = service.query_row(SELECT_USER_BY_ID, (user_id,))
    return User(user_id, first_name, last_name)


def delete_user(service: DatabaseService, user_id: int) -> int:
    count = service.execute(DELETE_USER, (user_id,))
    logger.info("Deleted a row! (%d affected)", count)
    return count
