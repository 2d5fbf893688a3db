"""
Repository contract.

Any storage-backed collection of one entity type exposes this set of
operations. Every blocking method has an ``*_async`` twin with the same
semantics that does not block the event loop.

Mutations only *stage* work against the bound session; nothing is
durable until ``commit()``.
"""

from typing import Iterable, List, Optional, Protocol, TypeVar

from premise.models.base import Entity

K = TypeVar("K")
T = TypeVar("T", bound=Entity)


class Repository(Protocol[K, T]):
    """Data repository for records of type T keyed by K."""

    model: type

    # ========================================
    # Select
    # ========================================

    def get(self, key: K) -> Optional[T]:
        """Record whose key equals ``key``, or None."""
        ...

    async def get_async(self, key: K) -> Optional[T]:
        ...

    def get_all(self):
        """Lazy, composable query over every record."""
        ...

    async def get_all_async(self) -> List[T]:
        """Every record, materialized."""
        ...

    # ========================================
    # Insert
    # ========================================

    def insert(self, record: T) -> None:
        ...

    async def insert_async(self, record: T) -> None:
        ...

    def insert_many(self, records: Iterable[T]) -> None:
        ...

    async def insert_many_async(self, records: Iterable[T]) -> None:
        ...

    # ========================================
    # Update
    # ========================================

    def update(self, record: T) -> None:
        ...

    async def update_async(self, record: T) -> None:
        ...

    def update_many(self, records: Iterable[T]) -> None:
        ...

    async def update_many_async(self, records: Iterable[T]) -> None:
        ...

    # ========================================
    # Delete
    # ========================================

    def delete(self, record: T) -> None:
        ...

    async def delete_async(self, record: T) -> None:
        ...

    def delete_many(self, records: Iterable[T]) -> None:
        ...

    async def delete_many_async(self, records: Iterable[T]) -> None:
        ...

    def delete_by_key(self, key: K) -> None:
        """Delete the record with ``key``; no-op if there is none."""
        ...

    async def delete_by_key_async(self, key: K) -> None:
        ...

    def delete_many_by_key(self, keys: Iterable[K]) -> None:
        """Delete every record whose key is in ``keys``; unknown keys are ignored."""
        ...

    async def delete_many_by_key_async(self, keys: Iterable[K]) -> None:
        ...

    # ========================================
    # Transactions
    # ========================================

    def commit(self) -> None:
        """Flush all staged changes in one transaction."""
        ...

    async def commit_async(self) -> None:
        ...

    # ========================================
    # Reload
    # ========================================

    def reload(self, record: T) -> None:
        ...

    async def reload_async(self, record: T) -> None:
        ...
