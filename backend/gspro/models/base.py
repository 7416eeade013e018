"""
Base models and mixins for SQLAlchemy ORM.

Provides the declarative base, mixins for timestamps and UUIDs,
and common utilities for all database models.
"""

from datetime import datetime
from typing import Any
import uuid

from sqlalchemy import Column, String
from sqlalchemy.orm import declarative_base


# SQLAlchemy declarative base for all ORM models
Base = declarative_base()


def utc_now() -> datetime:
    """Naive UTC datetime, the form SQLite hands back for DateTime columns."""
    return datetime.utcnow()


def utc_now_iso() -> str:
    """
    Get current UTC timestamp in ISO format.

    Returns:
        ISO format timestamp string (e.g., "2026-01-27T10:30:45.123456")
    """
    return utc_now().isoformat()


class TimestampMixin:
    """
    Mixin that adds created_at and updated_at timestamp columns.

    Timestamps are stored as UTC ISO strings so SQLite and PostgreSQL
    round-trip them identically.
    """

    created_at = Column(
        String,
        nullable=False,
        default=utc_now_iso,
        doc="UTC timestamp when record was created"
    )

    updated_at = Column(
        String,
        nullable=False,
        default=utc_now_iso,
        onupdate=utc_now_iso,
        doc="UTC timestamp when record was last updated"
    )


class UUIDMixin:
    """
    Mixin that adds a UUID primary key column stored as TEXT.
    """

    id = Column(
        String,
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
        doc="UUID primary key"
    )


class ModelMixin:
    """
    Mixin providing common model utilities.
    """

    def to_dict(self) -> dict[str, Any]:
        """
        Convert model instance to dictionary.

        Only includes columns, not relationships.
        """
        return {
            column.name: getattr(self, column.name)
            for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        attrs = ", ".join(
            f"{key}={repr(value)}"
            for key, value in self.to_dict().items()
            if key in ["id", "name", "email", "sku", "kind"]
        )
        return f"{self.__class__.__name__}({attrs})"
