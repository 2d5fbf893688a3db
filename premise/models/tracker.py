"""
Audit trail fields.

``TrackerMixin`` composes the four standard audit columns onto any
entity class:

    class Invoice(GuidEntityMixin, TrackerMixin, SerializationMixin, Base):
        __tablename__ = "invoices"
        ...

The columns are stamped by ``premise.repositories.TrackerRepository``;
nothing here fills them in on its own.
"""

from datetime import datetime, UTC
from typing import Optional, Protocol, runtime_checkable

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from premise.core.constants import (
    ACTOR_MAX_LENGTH,
    DISPLAY_CREATED_BY,
    DISPLAY_CREATED_ON,
    DISPLAY_MODIFIED_BY,
    DISPLAY_MODIFIED_ON,
)

TRACKER_FIELDS = ("created_on", "created_by", "modified_on", "modified_by")


@runtime_checkable
class Trackable(Protocol):
    """A record carrying the audit attributes."""

    created_on: datetime
    created_by: Optional[str]
    modified_on: Optional[datetime]
    modified_by: Optional[str]


class TrackerMixin:
    """
    Mixin that adds created/modified timestamps and actors.

    Attributes:
        created_on: When the record was inserted (UTC)
        created_by: Who inserted it (None if unknown)
        modified_on: Last update time (None until first update)
        modified_by: Who last updated it (None if unknown)
    """

    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(UTC),
        nullable=False,
        info={"display_name": DISPLAY_CREATED_ON},
    )
    created_by: Mapped[Optional[str]] = mapped_column(
        String(ACTOR_MAX_LENGTH),
        nullable=True,
        info={"display_name": DISPLAY_CREATED_BY},
    )
    modified_on: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        info={"display_name": DISPLAY_MODIFIED_ON},
    )
    modified_by: Mapped[Optional[str]] = mapped_column(
        String(ACTOR_MAX_LENGTH),
        nullable=True,
        info={"display_name": DISPLAY_MODIFIED_BY},
    )


def is_trackable(model: type) -> bool:
    """True if the mapped class carries every audit attribute."""
    return all(hasattr(model, name) for name in TRACKER_FIELDS)
