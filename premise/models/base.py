"""
Base Model
==========

Provides the declarative base, the entity key contract and the
key-only record mixins every persisted type is built from.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, Protocol, runtime_checkable

from sqlalchemy import Integer, Uuid
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from premise.core.constants import DISPLAY_ID


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


@runtime_checkable
class Entity(Protocol):
    """
    Anything a repository can store.

    The only requirement is a mutable ``id`` that uniquely identifies the
    record within its table. Identity is value equality on ``id``.
    """

    id: Any


class GuidEntityMixin:
    """Record keyed by a UUID (generated by the repository on insert)."""

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        info={"display_name": DISPLAY_ID},
    )


class IntEntityMixin:
    """Record keyed by an auto-incrementing integer."""

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        info={"display_name": DISPLAY_ID},
    )


class SerializationMixin:
    """Mixin that adds to_dict() serialization method."""

    def to_dict(self, exclude: set = None) -> Dict[str, Any]:
        """Convert model instance to dictionary."""
        exclude = exclude or set()
        result = {}
        for column in self.__table__.columns:
            if column.name in exclude:
                continue
            value = getattr(self, column.key)
            if isinstance(value, datetime):
                result[column.name] = value.isoformat()
            elif isinstance(value, uuid.UUID):
                result[column.name] = str(value)
            else:
                result[column.name] = value
        return result


def display_name(model: type, attribute: str) -> str:
    """
    Human-readable label of a mapped column.

    Falls back to the attribute name when the column carries none.
    """
    column = model.__table__.columns[attribute]
    return column.info.get("display_name", attribute)


def has_identity(record: Any) -> bool:
    """
    True once a record has been written to the database.

    Persistent and detached instances have an identity; new and
    unmapped objects do not.
    """
    state = sa_inspect(record, raiseerr=False)
    return state is not None and state.has_identity
