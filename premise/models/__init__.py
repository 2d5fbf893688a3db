"""
Database models package.

Contains the declarative base and the mixins records are composed from.
"""

from premise.models.base import (
    Base,
    Entity,
    GuidEntityMixin,
    IntEntityMixin,
    SerializationMixin,
    display_name,
    has_identity,
)
from premise.models.tracker import Trackable, TrackerMixin, is_trackable

__all__ = [
    "Base",
    "Entity",
    "GuidEntityMixin",
    "IntEntityMixin",
    "SerializationMixin",
    "Trackable",
    "TrackerMixin",
    "display_name",
    "has_identity",
    "is_trackable",
]
