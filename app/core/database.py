"""Database engine and session management (PostgreSQL in production, SQLite for local runs)."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import Settings, settings


def _connect_args(config: Settings) -> dict[str, Any]:
    """Driver-level connection options for the configured backend."""
    if config.DATABASE_URL.startswith("sqlite"):
        # Sessions are used from FastAPI's thread pool.
        return {"check_same_thread": False}
    if config.DB_STATEMENT_TIMEOUT_MS > 0:
        return {"options": f"-c statement_timeout={config.DB_STATEMENT_TIMEOUT_MS}"}
    return {}


def build_engine(config: Settings) -> Engine:
    """Create an engine for config.DATABASE_URL."""
    return create_engine(
        config.DATABASE_URL,
        pool_pre_ping=True,
        echo=config.DEBUG,
        connect_args=_connect_args(config),
    )


engine = build_engine(settings)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
