"""
Data access layer (Repository pattern).

Repositories stage changes against a SQLAlchemy session and
isolate callers from query construction.
"""

from premise.repositories.entity import EntityRepository, resolve_key_type
from premise.repositories.interface import Repository
from premise.repositories.keys import (
    KeyGenerator,
    PassthroughKeyGenerator,
    UuidKeyGenerator,
    key_generator_for,
)
from premise.repositories.tracker import TrackerRepository

__all__ = [
    "EntityRepository",
    "KeyGenerator",
    "PassthroughKeyGenerator",
    "Repository",
    "TrackerRepository",
    "UuidKeyGenerator",
    "key_generator_for",
    "resolve_key_type",
]
