"""Connection settings resolved from flags and the environment."""

import os
from dataclasses import dataclass
from typing import Mapping

from psycopg2.extensions import make_dsn


@dataclass(frozen=True)
class ConnectionSettings:
    host: str = "localhost"
    port: int = 5432
    dbname: str = "test_connect"
    user: str = "user"
    password: str = ""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] = os.environ) -> "ConnectionSettings":
        """Build settings from the libpq ``PG*`` variables, falling back to defaults."""
        defaults = cls()
        port = environ.get("PGPORT")
        try:
            port_number = int(port) if port else defaults.port
        except ValueError:
            raise ValueError(f"PGPORT must be an integer, got {port!r}") from None
        return cls(
            host=environ.get("PGHOST", defaults.host),
            port=port_number,
            dbname=environ.get("PGDATABASE", defaults.dbname),
            user=environ.get("PGUSER", defaults.user),
            password=environ.get("PGPASSWORD", defaults.password),
        )

    @property
    def dsn(self) -> str:
        """libpq keyword string, e.g. ``host=localhost port=5432 dbname=... user=... password=''``."""
        return make_dsn(
            host=self.host,
            port=self.port,
            dbname=self.dbname,
            user=self.user,
            password=self.password,
        )


def resolve_dsn(explicit: str | None = None, environ: Mapping[str, str] = os.environ) -> str:
    """Pick the connection string: explicit value, then DATABASE_URL, then PG* settings."""
    if explicit:
        return explicit
    url = environ.get("DATABASE_URL")
    if url:
        return url
    return ConnectionSettings.from_env(environ).dsn
