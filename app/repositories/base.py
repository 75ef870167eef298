"""Shared error translation for the SQLAlchemy-backed stores."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def store_errors(db: Session, operation: str) -> Iterator[None]:
    """Roll back and re-raise any SQLAlchemy failure as StoreError."""
    try:
        yield
    except SQLAlchemyError as e:
        db.rollback()
        logger.warning("Store operation failed: %s (%s)", operation, type(e).__name__)
        raise StoreError(f"Store operation failed: {operation}", cause=e) from e
