"""
db/connection.py
----------------
Opens PostgreSQL connections and scopes transactions.
Every data-access call opens its own connection and closes it when done;
nothing is pooled or shared between calls.
"""

from contextlib import contextmanager
from typing import Iterator

import psycopg2
from psycopg2 import extensions

from config import DATABASE_URL
from utils.exceptions import DatabaseConnectionError, PersistenceError
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection() -> extensions.connection:
    """
    Open a new database connection.

    Returns:
        A psycopg2 connection with autocommit disabled.

    Raises:
        DatabaseConnectionError: If the database is unreachable.
    """
    try:
        conn = psycopg2.connect(DATABASE_URL)
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to connect to the database: {e}")
        raise DatabaseConnectionError(f"Unable to connect to the database: {e}") from e
    conn.autocommit = False
    logger.debug("Database connection established.")
    return conn


def release_connection(conn) -> None:
    """
    Close a connection obtained from `get_connection`.

    Args:
        conn: The psycopg2 connection to close.
    """
    conn.close()


@contextmanager
def transaction() -> Iterator[extensions.connection]:
    """
    Run a block inside a single transaction on a fresh connection.

    Commits when the block exits normally. On failure the transaction is
    rolled back first; driver errors are re-raised as PersistenceError,
    anything else propagates unchanged. The connection is always closed.

    Raises:
        DatabaseConnectionError: If no connection could be opened.
        PersistenceError: If a SQL statement failed.
    """
    conn = get_connection()
    try:
        yield conn
        conn.commit()
    except psycopg2.Error as e:
        _rollback(conn)
        logger.error(f"Transaction rolled back: {e}")
        raise PersistenceError(str(e).strip() or type(e).__name__) from e
    except Exception:
        _rollback(conn)
        logger.error("Transaction rolled back after an unexpected error.")
        raise
    finally:
        release_connection(conn)


def _rollback(conn) -> None:
    """Roll back, tolerating a connection the server has already dropped."""
    if conn.closed:
        return
    try:
        conn.rollback()
    except psycopg2.Error as e:
        logger.error(f"Rollback failed: {e}")
