#!/usr/bin/env python3
"""
Print the scheduled posts of one user.

Usage:
    postplanner-report JohnDoe [--database-url sqlite:///./postplanner.db]

Opens a single connection, prints one line per post (or "0 results") and
closes it again. A connection failure ends the process; nothing is retried.
"""
import argparse
from typing import List, Optional

from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from .config import get_settings
from .logging_config import cli_logger
from .queries import PostReportRow, list_posts_by_user_name


def format_row(row: PostReportRow) -> str:
    return (
        f"Post: {row.content} - Design: {row.design_name} - "
        f"Platform: {row.platform_name} - "
        f"Scheduled At: {row.scheduled_at:%Y-%m-%d %H:%M:%S}"
    )


def render(rows: List[PostReportRow]) -> List[str]:
    """Text lines for a report; an empty result is a normal outcome."""
    if not rows:
        return ["0 results"]
    return [format_row(row) for row in rows]


def run_report(database_url: str, user_name: str) -> List[PostReportRow]:
    engine = create_engine(database_url)
    try:
        try:
            connection = engine.connect()
        except OperationalError as e:
            cli_logger.error("Connection failed", error=e, database_url=engine.url.render_as_string(hide_password=True))
            raise SystemExit(f"Connection failed: {e.orig}")

        with connection:
            with Session(bind=connection) as db:
                return list_posts_by_user_name(db, user_name)
    finally:
        engine.dispose()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="List the scheduled posts of a user")
    parser.add_argument("user_name", help="Name of the user whose posts to list")
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy database URL (default: DATABASE_URL setting)",
    )
    args = parser.parse_args(argv)

    database_url = args.database_url or get_settings().database_url
    rows = run_report(database_url, args.user_name)
    for line in render(rows):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
