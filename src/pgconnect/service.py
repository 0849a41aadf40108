"""Abstract DatabaseService interface."""

import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from queue import Empty, Queue
from typing import Any, Iterator

from pgconnect.placeholders import bind_positional
from pgconnect.types import Params, Row


class DatabaseService(ABC):
    """Database-agnostic handle over a fixed-size pool of driver connections.

    Statements use numbered ``$n`` markers; each backend rewrites them to its
    driver's paramstyle. Every statement runs on its own pooled connection and
    is committed on success or rolled back on error.

    Usable as a context manager: ``with service:`` connects on entry and
    closes the pool on exit.
    """

    dialect: str = ""
    marker: str = "?"

    def __init__(self, pool_size: int = 4):
        self._pool_size = pool_size
        self._pool: Queue = Queue(maxsize=pool_size)
        self._lock = threading.Lock()
        self._connected = False
        self._members: set = set()

    @abstractmethod
    def _open(self) -> Any:
        """Open a single driver connection."""

    def _cursor(self, conn: Any) -> Any:
        """Return a new cursor on ``conn``; the caller closes it."""
        return conn.cursor()

    def connect(self) -> None:
        """Open the connection pool, closing any partial pool on failure."""
        with self._lock:
            if self._connected:
                return
            try:
                for _ in range(self._pool_size):
                    conn = self._open()
                    self._members.add(conn)
                    self._pool.put(conn)
            except Exception:
                self._drain()
                raise
            self._connected = True

    def close(self) -> None:
        """Close all connections and release resources."""
        with self._lock:
            self._connected = False
            self._drain()

    def _drain(self) -> None:
        self._members.clear()
        while not self._pool.empty():
            try:
                conn = self._pool.get_nowait()
                conn.close()
            except Empty:
                break

    def __enter__(self) -> "DatabaseService":
        self.connect()
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _acquire(self) -> Any:
        if not self._connected:
            raise RuntimeError(
                "Database service is not connected. Call connect() before issuing statements."
            )
        return self._pool.get(timeout=30)

    def _release(self, conn: Any) -> None:
        with self._lock:
            if conn in self._members:
                self._pool.put(conn)
                return
        # checked out when close() ran; not part of the current pool
        conn.close()

    @contextmanager
    def _connection(self) -> Iterator[Any]:
        conn = self._acquire()
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._release(conn)

    @contextmanager
    def _executed(self, sql: str, params: Params | None) -> Iterator[Any]:
        sql, values = bind_positional(sql, params, self.marker)
        with self._connection() as conn:
            cur = self._cursor(conn)
            try:
                if values:
                    cur.execute(sql, values)
                else:
                    cur.execute(sql)
                yield cur
            finally:
                cur.close()

    def ping(self) -> None:
        """Round-trip a trivial statement to confirm the database is usable."""
        with self._executed("SELECT 1", None) as cur:
            cur.fetchone()

    @contextmanager
    def query(self, sql: str, params: Params | None = None) -> Iterator[Iterator[Row]]:
        """Run a query and yield an iterator over its result set.

        The result set is released when the block exits, whether the rows
        were fully consumed or an error interrupted the iteration.
        """
        with self._executed(sql, params) as cur:
            yield (tuple(row) for row in cur)

    def query_row(self, sql: str, params: Params | None = None) -> Row:
        """Return the first row of a query; raise LookupError if there is none."""
        with self._executed(sql, params) as cur:
            row = cur.fetchone()
        if row is None:
            raise LookupError("no rows in result set")
        return tuple(row)

    def execute(self, sql: str, params: Params | None = None) -> int:
        """Execute a statement that returns no rows and report rows affected."""
        with self._executed(sql, params) as cur:
            return cur.rowcount

    @abstractmethod
    def execute_ddl(self, sql: str) -> None:
        """Execute DDL statements (CREATE TABLE, CREATE INDEX, etc.)."""
