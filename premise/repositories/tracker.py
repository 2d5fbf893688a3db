"""
Auditing repository.

Wraps any repository whose model carries the ``TrackerMixin`` columns and
stamps them before delegating:

- insert: created_on / created_by
- update: modified_on / modified_by (every call, bulk included)

The acting username is fixed when the wrapper is built.
"""

from datetime import datetime, UTC
from typing import Generic, Iterable, List, Optional

from premise.config import settings
from premise.core.errors import RepositoryConfigurationError
from premise.models.base import has_identity
from premise.models.tracker import is_trackable
from premise.repositories.interface import K, Repository, T


class TrackerRepository(Generic[K, T]):
    """
    Repository decorator that maintains audit fields.

    Example:
        repo = TrackerRepository(EntityRepository(db, Invoice), username="alice")
        invoice.total = 42
        repo.update(invoice)   # modified_on/modified_by stamped
        repo.commit()
    """

    def __init__(self, inner: Repository[K, T], username: Optional[str] = None):
        """
        Args:
            inner: Repository to delegate to
            username: Acting user; defaults to settings.audit_username.
                Blank names are recorded as None.

        Raises:
            RepositoryConfigurationError: If the inner model has no audit columns
        """
        if not is_trackable(inner.model):
            raise RepositoryConfigurationError(
                f"{inner.model.__name__} does not carry the audit fields"
            )
        self.inner = inner
        self.username = settings.audit_username if username is None else username

    @property
    def model(self) -> type:
        return self.inner.model

    @property
    def actor(self) -> Optional[str]:
        """Value written to created_by / modified_by."""
        if not self.username or not self.username.strip():
            return None
        return self.username

    def __repr__(self) -> str:
        return f"<TrackerRepository(inner={self.inner!r}, username={self.username!r})>"

    # ========================================
    # Stamping
    # ========================================

    def set_created(self, records: Iterable[T]) -> None:
        """Stamp creation fields on records not yet in the database."""
        now = datetime.now(UTC)
        for record in records:
            if has_identity(record):
                continue
            record.created_on = now
            record.created_by = self.actor

    def set_modified(self, records: Iterable[T]) -> None:
        now = datetime.now(UTC)
        for record in records:
            record.modified_on = now
            record.modified_by = self.actor

    # ========================================
    # Select
    # ========================================

    def get(self, key: K) -> Optional[T]:
        return self.inner.get(key)

    async def get_async(self, key: K) -> Optional[T]:
        return await self.inner.get_async(key)

    def get_all(self):
        return self.inner.get_all()

    async def get_all_async(self) -> List[T]:
        return await self.inner.get_all_async()

    # ========================================
    # Insert
    # ========================================

    def insert(self, record: T) -> None:
        self.set_created([record])
        self.inner.insert(record)

    async def insert_async(self, record: T) -> None:
        self.set_created([record])
        await self.inner.insert_async(record)

    def insert_many(self, records: Iterable[T]) -> None:
        records = list(records)
        self.set_created(records)
        self.inner.insert_many(records)

    async def insert_many_async(self, records: Iterable[T]) -> None:
        records = list(records)
        self.set_created(records)
        await self.inner.insert_many_async(records)

    # ========================================
    # Update
    # ========================================

    def update(self, record: T) -> None:
        self.set_modified([record])
        self.inner.update(record)

    async def update_async(self, record: T) -> None:
        self.set_modified([record])
        await self.inner.update_async(record)

    def update_many(self, records: Iterable[T]) -> None:
        records = list(records)
        self.set_modified(records)
        self.inner.update_many(records)

    async def update_many_async(self, records: Iterable[T]) -> None:
        records = list(records)
        self.set_modified(records)
        await self.inner.update_many_async(records)

    # ========================================
    # Delete
    # ========================================

    def delete(self, record: T) -> None:
        self.inner.delete(record)

    async def delete_async(self, record: T) -> None:
        await self.inner.delete_async(record)

    def delete_many(self, records: Iterable[T]) -> None:
        self.inner.delete_many(records)

    async def delete_many_async(self, records: Iterable[T]) -> None:
        await self.inner.delete_many_async(records)

    def delete_by_key(self, key: K) -> None:
        self.inner.delete_by_key(key)

    async def delete_by_key_async(self, key: K) -> None:
        await self.inner.delete_by_key_async(key)

    def delete_many_by_key(self, keys: Iterable[K]) -> None:
        self.inner.delete_many_by_key(keys)

    async def delete_many_by_key_async(self, keys: Iterable[K]) -> None:
        await self.inner.delete_many_by_key_async(keys)

    # ========================================
    # Transactions
    # ========================================

    def commit(self) -> None:
        self.inner.commit()

    async def commit_async(self) -> None:
        await self.inner.commit_async()

    # ========================================
    # Reload
    # ========================================

    def reload(self, record: T) -> None:
        self.inner.reload(record)

    async def reload_async(self, record: T) -> None:
        await self.inner.reload_async(record)
