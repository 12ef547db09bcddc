"""
Link rows between two entities (job<->technology, user<->technology,
user<->job applications).

Callers verify that both sides exist before linking. The duplicate check
here is an early exit; the UNIQUE constraint on each join table is what
actually prevents duplicates, and its violation is reported the same way.
A foreign key violation on insert (a side deleted after the checks) is
reported as not found.

Table and column names are module constants of the calling crud module,
never request data.
"""

from typing import Any, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from jobly.core.database import run_sql
from jobly.core.exceptions import BadRequestError, NotFoundError
from jobly.core.logging_config import get_logger

logger = get_logger(__name__)


def is_linked(db: Session, table: str, cols: Tuple[str, str], keys: Tuple[Any, Any]) -> bool:
    """Return True if the (subject, object) pair is already linked."""
    sql = f"SELECT 1 FROM {table} WHERE {cols[0]} = $1 AND {cols[1]} = $2"
    return run_sql(db, sql, keys).first() is not None


def link(
    db: Session,
    table: str,
    cols: Tuple[str, str],
    keys: Tuple[Any, Any],
    duplicate_message: str,
    missing_message: str,
) -> None:
    """
    Insert a link row.

    A rejected insert is classified after rollback: if the pair exists now,
    a concurrent request linked it first; otherwise one side was deleted
    after the caller's existence checks (foreign key violation).

    Raises:
        BadRequestError: If the pair is already linked
        NotFoundError: If either side disappeared before the insert
    """
    if is_linked(db, table, cols, keys):
        raise BadRequestError(duplicate_message)

    try:
        run_sql(db, f"INSERT INTO {table} ({cols[0]}, {cols[1]}) VALUES ($1, $2)", keys)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        if is_linked(db, table, cols, keys):
            logger.warning(f"Unique constraint rejected duplicate link in {table}: {keys}")
            raise BadRequestError(duplicate_message) from exc
        logger.warning(f"Foreign key rejected link in {table}: {keys}")
        raise NotFoundError(missing_message) from exc

    logger.info(f"Linked {table}: {keys}")


def unlink(db: Session, table: str, cols: Tuple[str, str], keys: Tuple[Any, Any]) -> bool:
    """
    Delete a link row.

    Returns:
        True if a row was deleted, False if the pair was not linked
    """
    result = run_sql(db, f"DELETE FROM {table} WHERE {cols[0]} = $1 AND {cols[1]} = $2", keys)
    db.commit()
    return result.rowcount > 0
