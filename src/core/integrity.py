"""
Duplicate checks and write transactions shared by the location services.

The application-level check runs in the same transaction as the write. The
store carries unique constraints on the same columns; when two writers race
past the check, the loser's IntegrityError is surfaced as DuplicateEntityError.
"""
import logging
from contextlib import contextmanager
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.core.exceptions import DuplicateEntityError, LocationError

logger = logging.getLogger(__name__)


def find_conflict(db: Session, model, criteria: dict, exclude_id=None):
    """
    First row of ``model`` matching every column in ``criteria``.
    ``None`` values match NULL. ``exclude_id`` skips the row being updated.
    """
    query = db.query(model).filter_by(**criteria)
    if exclude_id is not None:
        query = query.filter(model.id != exclude_id)
    return query.first()


def ensure_unique(
    db: Session,
    model,
    criteria: dict,
    description: str,
    exclude_id=None,
) -> None:
    conflict = find_conflict(db, model, criteria, exclude_id=exclude_id)
    if conflict is not None:
        raise DuplicateEntityError(model.__name__, description, conflicting_id=conflict.id)


def is_unique_violation(error: IntegrityError) -> bool:
    message = str(error.orig).lower()
    return "unique" in message or "duplicate key" in message


@contextmanager
def write_transaction(db: Session, entity: str, description: Optional[str] = None):
    """
    Commit the work done inside the block, or roll it back.

    Any error raised in the block rolls back and propagates unchanged,
    except a unique violation from the store, which becomes DuplicateEntityError.
    """
    try:
        yield
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not is_unique_violation(e):
            logger.error(f"Integrity error writing {entity.lower()}: {e.orig}")
            raise
        logger.warning(f"Unique constraint rejected {entity.lower()} ({description}): {e.orig}")
        raise DuplicateEntityError(entity, description or "these values") from e
    except LocationError:
        db.rollback()
        raise
    except Exception as e:
        db.rollback()
        logger.error(f"Error writing {entity.lower()}, changes rolled back: {e}")
        raise
