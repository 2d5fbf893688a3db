"""
Key generation strategies.

A repository picks one strategy when it is constructed, based on the
declared key type of its model, and applies it to every record it
inserts.
"""

import uuid
from typing import Any, Iterable

from premise.models.base import has_identity


class KeyGenerator:
    """Assigns keys to records about to be inserted."""

    def assign(self, records: Iterable[Any]) -> None:
        raise NotImplementedError


class PassthroughKeyGenerator(KeyGenerator):
    """Leaves caller-supplied keys (or database defaults) alone."""

    def assign(self, records: Iterable[Any]) -> None:
        pass


class UuidKeyGenerator(KeyGenerator):
    """
    Gives every record a fresh random UUID.

    Any key the caller already set on a new record is overwritten.
    Records already stored in the database keep their key.
    """

    def assign(self, records: Iterable[Any]) -> None:
        for record in records:
            if has_identity(record):
                continue
            record.id = uuid.uuid4()


def key_generator_for(key_type: type) -> KeyGenerator:
    """
    Strategy for a key type.

    Example:
        key_generator_for(uuid.UUID)  # UuidKeyGenerator
        key_generator_for(int)        # PassthroughKeyGenerator
    """
    if key_type is uuid.UUID:
        return UuidKeyGenerator()
    return PassthroughKeyGenerator()
