"""Database configuration, session management and raw query execution."""

import re
import sqlite3
from typing import Any, Sequence

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from jobly.config import settings

# The model_validator in Settings always populates this field after init.
assert settings.database_url is not None, "database_url must be set in Settings"
DATABASE_URL: str = settings.database_url

if DATABASE_URL.startswith("sqlite"):
    engine = create_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},  # Needed for SQLite
        echo=False,
    )
else:
    engine = create_engine(
        DATABASE_URL,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()

_POSITIONAL_PARAM = re.compile(r"\$(\d+)")


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores FOREIGN KEY clauses (and ON DELETE CASCADE) unless asked."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON")
        finally:
            cursor.close()


def get_db():
    """
    Dependency function to get database session.

    Yields:
        Session: SQLAlchemy database session
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def run_query(db: Session, sql: str, values: Sequence[Any] = ()) -> list[dict[str, Any]]:
    """
    Execute SQL written with ``$1``-style positional placeholders.

    Placeholders are rewritten to SQLAlchemy named binds (``$2`` -> ``:p2``) and
    bound to ``values`` by position. Statements without a result set (or
    without ``RETURNING``) produce an empty list.

    Args:
        db: SQLAlchemy database session
        sql: Statement text with ``$N`` placeholders
        values: Positional values; ``values[0]`` binds ``$1``

    Returns:
        One dict per row, keyed by the selected column labels

    Examples:
        >>> run_query(db, "SELECT handle FROM companies WHERE handle = $1", ["c1"])
        [{'handle': 'c1'}]
    """
    if db.get_bind().dialect.name == "sqlite":
        # SQLite has no ILIKE; its LIKE is already case-insensitive for ASCII.
        sql = sql.replace(" ILIKE ", " LIKE ")

    params = {f"p{idx}": value for idx, value in enumerate(values, start=1)}
    result = db.execute(text(_POSITIONAL_PARAM.sub(r":p\1", sql)), params)
    if not result.returns_rows:
        return []
    return [dict(row) for row in result.mappings().all()]
