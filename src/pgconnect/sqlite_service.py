"""SQLite implementation of DatabaseService."""

import sqlite3

from pgconnect.service import DatabaseService


class SQLiteDatabaseService(DatabaseService):
    """SQLite backend using stdlib sqlite3.

    Connections are opened with ``check_same_thread=False`` so the pool can
    hand them to any thread.
    """

    dialect = "sqlite"
    marker = "?"

    def __init__(self, db_path: str, pool_size: int = 4):
        super().__init__(pool_size)
        self._db_path = db_path

    def _open(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._db_path, check_same_thread=False)
        conn.execute("PRAGMA journal_mode=WAL")
        conn.execute("PRAGMA foreign_keys=ON")
        return conn

    def execute_ddl(self, sql: str) -> None:
        conn = self._acquire()
        try:
            conn.executescript(sql)
            conn.commit()
        finally:
            self._release(conn)
