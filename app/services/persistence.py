# app/services/persistence.py
"""
Write helpers shared by the record services.
Uniqueness is left to the database's UNIQUE constraints; a violated constraint
comes back as IntegrityError and is reported against the column it names.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from app.utils.errors import RecordRejected, ErrorCategory
from app.utils.logger import get_logger

logger = get_logger(__name__)


def commit_or_reject(db: Session, entity: str, unique_fields: tuple, record=None):
    """
    Commit the session. On a constraint violation roll back and raise RecordRejected
    naming the offending unique field (or a reference conflict if none matches).
    """
    # Rollback expires the record, so read the submitted values first
    submitted = {f: getattr(record, f, None) for f in unique_fields} if record is not None else {}
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        detail = str(e.orig)
        for field in unique_fields:
            if field in detail:
                value = submitted.get(field)
                logger.warning(f"[{entity}] rejected duplicate {field}={value!r}")
                raise RecordRejected(
                    field, ErrorCategory.UNIQUENESS_VIOLATION,
                    f"{entity} with {field} '{value}' already exists",
                ) from e
        logger.warning(f"[{entity}] rejected by storage constraint: {detail}")
        raise RecordRejected(
            entity.lower(), ErrorCategory.REFERENCE_CONFLICT,
            f"{entity} violates a storage constraint",
        ) from e
    if record is not None:
        db.refresh(record)
    return record


def apply_changes(record, changes: dict):
    for field, value in changes.items():
        setattr(record, field, value)
    return record
