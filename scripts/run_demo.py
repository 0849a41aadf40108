"""CLI entry point for the users demo.

Connects, pings, then runs insert / update / fetch-one / delete against the
users table, listing every row between steps. Any error ends the process
with status 1.

Usage:
    python -m scripts.run_demo --dsn "host=localhost port=5432 dbname=test_connect user=user password="
    python -m scripts.run_demo --dsn sqlite:///demo.db --create-schema
"""

import argparse
import logging
import sys

from pgconnect import DatabaseService, create_service
from pgconnect.config import resolve_dsn
from pgconnect.users import (
    delete_user,
    ensure_users_schema,
    get_all_rows,
    get_user,
    insert_user,
    update_first_name,
)

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run parameterized statements against users")
    parser.add_argument(
        "--dsn",
        help="Connection string (libpq keywords, postgresql:// or sqlite:///). "
        "Defaults to DATABASE_URL, then the PG* environment variables.",
    )
    parser.add_argument(
        "--create-schema", action="store_true", help="Create the users table if missing"
    )
    parser.add_argument("--pool-size", type=int, default=4, help="Pooled connections")
    parser.add_argument("--first-name", default="Jack", help="First name to insert")
    parser.add_argument("--last-name", default="Brown", help="Last name to insert")
    parser.add_argument("--new-first-name", default="Jackie", help="First name for the update")
    parser.add_argument("--update-id", type=int, default=5, help="Id of the row to update")
    parser.add_argument("--fetch-id", type=int, default=1, help="Id of the row to fetch")
    parser.add_argument("--delete-id", type=int, default=6, help="Id of the row to delete")
    return parser.parse_args(argv)


def run(service: DatabaseService, args: argparse.Namespace) -> None:
    """Run the demo sequence on a connected, pinged service, raising on the first error."""
    if args.create_schema:
        ensure_users_schema(service)

    get_all_rows(service)

    insert_user(service, args.first_name, args.last_name)
    get_all_rows(service)

    update_first_name(service, args.update_id, args.new_first_name)
    get_all_rows(service)

    user = get_user(service, args.fetch_id)
    logger.info("QueryRow returns %d %s %s", user.id, user.first_name, user.last_name)

    delete_user(service, args.delete_id)
    get_all_rows(service)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        service = create_service(resolve_dsn(args.dsn), args.pool_size)
        service.connect()
    except Exception as e:
        logger.error("Unable to connect: %s", e)
        sys.exit(1)
    logger.info("Connected to database")

    try:
        try:
            service.ping()
        except Exception as e:
            logger.error("Cannot connect to database! %s", e)
            sys.exit(1)
        logger.info("Pinged database")

        run(service, args)
    except Exception as e:
        logger.error("%s", e)
        sys.exit(1)
    finally:
        service.close()


if __name__ == "__main__":
    main()
