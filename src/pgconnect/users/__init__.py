"""Users table: schema and the statements run against it."""

from pgconnect.users.store import (
    User,
    delete_user,
    ensure_users_schema,
    get_all_rows,
    get_user,
    insert_user,
    update_first_name,
)

__all__ = [
    "User",
    "ensure_users_schema",
    "get_all_rows",
    "insert_user",
    "update_first_name",
    "get_user",
    "delete_user",
]
