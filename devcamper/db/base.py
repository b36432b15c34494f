"""
Base SQLAlchemy configuration for the application.

All models inherit from the Base class defined here.
"""

import re
import secrets
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, MetaData, String
from sqlalchemy.orm import declarative_base

# Define a consistent naming convention for constraints
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)

Base = declarative_base(metadata=metadata)


def generate_id() -> str:
    """Opaque 24 character hex document id."""
    return secrets.token_hex(12)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_camel_case(name: str) -> str:
    """``average_cost`` -> ``averageCost``."""
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def to_snake_case(name: str) -> str:
    """``averageCost`` -> ``average_cost``."""
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


class BaseModel(Base):
    """Base model for all document-style models."""

    __abstract__ = True

    id = Column(String(24), primary_key=True, default=generate_id)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)


__all__ = [
    "Base",
    "BaseModel",
    "generate_id",
    "metadata",
    "to_camel_case",
    "to_snake_case",
]
