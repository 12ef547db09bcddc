import logging
import re
from typing import Any, Dict, Generator, Sequence, Tuple

from sqlalchemy import create_engine, text
from sqlalchemy.engine import CursorResult
from sqlalchemy.ext.declarative import declarative_base
from sqlalchemy.orm import Session, sessionmaker
from jobly.core.config import settings

logger = logging.getLogger(__name__)


def _engine_kwargs(db_url: str) -> dict:
    if db_url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,  # Verify connections before using them
        "pool_size": 10,  # Connection pool size
        "max_overflow": 20,  # Allow up to 20 connections beyond pool_size
    }


# Create SQLAlchemy engine
engine = create_engine(settings.DATABASE_URL, **_engine_kwargs(settings.DATABASE_URL))

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()

# PostgreSQL-style positional placeholders: $1, $2, ...
_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


def get_db() -> Generator[Session, None, None]:
    """
    Dependency function to get database session.
    Used in FastAPI endpoints with Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def compile_placeholders(sql: str, values: Sequence[Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Rewrite `$n` placeholders into SQLAlchemy named binds.

    `"name"=$1 WHERE handle = $2` with values ["Acme", "acme"] becomes
    `"name"=:p1 WHERE handle = :p2` with {"p1": "Acme", "p2": "acme"}.

    Raises:
        IndexError: If a placeholder has no matching value
    """
    params: Dict[str, Any] = {}

    def repl(match: "re.Match[str]") -> str:
        idx = int(match.group(1))
        if idx < 1 or idx > len(values):
            raise IndexError(f"No value bound for placeholder ${idx}")
        name = f"p{idx}"
        params[name] = values[idx - 1]
        return f":{name}"

    return _PLACEHOLDER_RE.sub(repl, sql), params


def run_sql(db: Session, sql: str, values: Sequence[Any] = ()) -> CursorResult:
    """
    Execute a parameterized statement written with `$n` placeholders.

    Lets statements assembled by sql_for_partial_update run unchanged on
    PostgreSQL and on the SQLite database used by the test suite.
    """
    compiled, params = compile_placeholders(sql, list(values))
    logger.debug("Executing SQL: %s", compiled)
    return db.execute(text(compiled), params)


def init_db() -> None:
    """
    Initialize database.

    Alembic owns the schema in PostgreSQL ("alembic upgrade head").
    For SQLite URLs (local runs) the tables are created directly.
    """
    from jobly.models import company, job, user, application, technology  # noqa: F401 - register models
    if settings.DATABASE_URL.startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def close_db() -> None:
    """Release every pooled connection."""
    engine.dispose()
