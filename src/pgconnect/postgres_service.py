"""PostgreSQL implementation of DatabaseService."""

import psycopg2
import psycopg2.extensions

from pgconnect.service import DatabaseService


class PostgresDatabaseService(DatabaseService):
    """PostgreSQL backend using psycopg2.

    ``dsn`` is anything libpq accepts: a keyword string such as
    ``host=localhost port=5432 dbname=test_connect user=user password=``
    or a ``postgresql://`` URL.
    """

    dialect = "postgresql"
    marker = "%s"

    def __init__(self, dsn: str, pool_size: int = 4):
        super().__init__(pool_size)
        self._dsn = dsn

    def _open(self) -> psycopg2.extensions.connection:
        conn = psycopg2.connect(self._dsn)
        conn.autocommit = False
        return conn

    def execute_ddl(self, sql: str) -> None:
        conn = self._acquire()
        try:
            with conn.cursor() as cur:
                for statement in sql.split(";"):
                    statement = statement.strip()
                    if statement:
                        cur.execute(statement)
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            self._release(conn)
