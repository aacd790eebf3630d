"""Mixins for SQLAlchemy models."""

import uuid
from datetime import UTC, datetime

from sqlalchemy import Column, DateTime, String, func


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(UTC)


def new_uuid() -> str:
    """Random UUID4 string used as a primary key."""
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    """Mixin to add an opaque string primary key."""

    id = Column(String(36), primary_key=True, default=new_uuid)


class TimestampMixin:
    """Mixin to add created_at and updated_at timestamp columns."""

    created_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at = Column(
        DateTime(timezone=True),
        default=utc_now,
        server_default=func.now(),
        onupdate=utc_now,
        nullable=False,
    )
