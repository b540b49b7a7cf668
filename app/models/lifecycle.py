# app/models/lifecycle.py
"""
Creation/update stamping for persisted records.

Records opt in by inheriting TimestampMixin. The stamping itself is an explicit
before-save step: the session's before_flush listener calls before_create() on
every pending record and before_update() on every modified one, once per flush.
Constructors never stamp anything.
"""

from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, event
from sqlalchemy.orm import Session


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what the DateTime columns store."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    created_at = Column(DateTime)
    updated_at = Column(DateTime)

    def apply_defaults(self):
        """Resolve unset enum fields to their default variants. Override per record."""

    def before_create(self):
        now = utcnow()
        self.created_at = now
        self.updated_at = now
        self.apply_defaults()

    def before_update(self):
        self.updated_at = utcnow()


@event.listens_for(Session, "before_flush")
def _stamp_records(session, flush_context, instances):
    for obj in session.new:
        if isinstance(obj, TimestampMixin):
            obj.before_create()
    for obj in session.dirty:
        if isinstance(obj, TimestampMixin) and session.is_modified(obj, include_collections=False):
            obj.before_update()
