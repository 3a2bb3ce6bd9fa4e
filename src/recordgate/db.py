"""
Database connection and query utilities.

Provides a simple interface for executing queries with psycopg,
returning results as dictionaries.

For testing, use set_connection_override() to inject a connection
that will be used instead of creating new ones. This enables
transaction rollback between tests.
"""

from contextlib import contextmanager
from importlib import resources
from typing import Any

import psycopg
from psycopg.rows import dict_row

from recordgate.config import config
from recordgate.errors import RecordGateError
from recordgate.logger import get_logger

logger = get_logger(__name__)

# =============================================================================
# Connection Override (for testing)
# =============================================================================

_connection_override: psycopg.Connection | None = None


def set_connection_override(conn: psycopg.Connection) -> None:
    """
    Set a connection to use instead of creating new ones.

    Used by test fixtures to ensure all database operations run
    within a single transaction that can be rolled back.

    Args:
        conn: The connection to use for all subsequent operations
    """
    global _connection_override
    _connection_override = conn


def clear_connection_override() -> None:
    """Clear the connection override, restoring normal behavior."""
    global _connection_override
    _connection_override = None


# =============================================================================
# Connection Management
# =============================================================================


@contextmanager
def get_connection():
    """
    Context manager for database connections.

    In normal operation:
        - Opens a new connection
        - Commits on successful exit
        - Rolls back on exception
        - Closes connection when done

    With override set (testing):
        - Returns the override connection
        - Does NOT commit, rollback, or close
        - Caller (test fixture) manages the transaction
    """
    if _connection_override is not None:
        yield _connection_override
        return

    conn = psycopg.connect(config.database_url)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@contextmanager
def get_cursor():
    """
    Context manager for a cursor with dict rows.

    Usage:
        with get_cursor() as cur:
            cur.execute("SELECT * FROM accounts")
            rows = cur.fetchall()  # List of dicts
    """
    with get_connection() as conn:
        with conn.cursor(row_factory=dict_row) as cur:
            yield cur


# =============================================================================
# Query Helpers
# =============================================================================


def execute(query, params: tuple = None) -> int:
    """
    Execute a query without returning results.

    Args:
        query: SQL string or psycopg.sql.Composed with %s placeholders
        params: Tuple of parameter values

    Returns:
        Number of rows affected
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.rowcount


def fetch_one(query, params: tuple = None) -> dict[str, Any] | None:
    """
    Execute a query and return a single row as dict.

    Returns:
        Dict of column names to values, or None if no row found
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchone()


def fetch_all(query, params: tuple = None) -> list[dict[str, Any]]:
    """
    Execute a query and return all rows as list of dicts.

    Returns:
        List of dicts, empty list if no rows found
    """
    with get_cursor() as cur:
        cur.execute(query, params)
        return cur.fetchall()


# =============================================================================
# Schema
# =============================================================================


def migration_files(migrations_dir=None) -> list:
    """
    The *.sql files in migrations_dir, in name order.

    Defaults to the migrations shipped inside the recordgate package.

    Raises:
        RecordGateError: if the directory holds no *.sql files
    """
    if migrations_dir is None:
        migrations_dir = resources.files("recordgate") / "migrations"
    files = []
    if migrations_dir.is_dir():
        files = sorted(
            (path for path in migrations_dir.iterdir() if path.name.endswith(".sql")),
            key=lambda path: path.name,
        )
    if not files:
        raise RecordGateError(f"No migrations found in {migrations_dir}")
    return files


def apply_migrations(migrations_dir=None) -> list[str]:
    """
    Run every migration file, in name order.

    Statements are written to be re-runnable (CREATE ... IF NOT EXISTS).

    Returns:
        Names of the files applied
    """
    applied = []
    for path in migration_files(migrations_dir):
        with get_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(path.read_text())
        logger.info("Applied migration %s", path.name)
        applied.append(path.name)
    return applied
