"""
Entity repository.

Binds the repository contract to a SQLAlchemy session for one mapped
class. Inserts, updates and deletes are staged in the session's unit of
work; ``commit()`` flushes them in a single transaction.

Example:
    with get_db_context() as db:
        invoices = EntityRepository(db, Invoice)
        invoices.insert(Invoice(total=10))
        invoices.commit()
"""

import asyncio
from typing import Generic, Iterable, List, Optional

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from premise.core.errors import RepositoryConfigurationError
from premise.core.logger import get_logger
from premise.models.base import has_identity
from premise.repositories.interface import K, T
from premise.repositories.keys import KeyGenerator, key_generator_for

logger = get_logger(__name__)


def resolve_key_type(model: type) -> type:
    """
    Python type of the model's ``id`` column.

    Raises:
        RepositoryConfigurationError: If the model is unmapped or has no
            ``id`` column
    """
    mapper = sa_inspect(model, raiseerr=False)
    if mapper is None:
        raise RepositoryConfigurationError(f"{model!r} is not a mapped class")
    if "id" not in mapper.columns:
        raise RepositoryConfigurationError(f"{model.__name__} has no 'id' column")
    try:
        return mapper.columns["id"].type.python_type
    except NotImplementedError:
        # Custom column types are treated as opaque keys
        return object


class EntityRepository(Generic[K, T]):
    """
    Generic SQLAlchemy repository.

    Attributes:
        session: The bound session (owned by the caller)
        model: The mapped class this repository serves
        key_type: Python type of the ``id`` column
    """

    def __init__(
        self,
        session: Session,
        model: type,
        key_type: Optional[type] = None,
        key_generator: Optional[KeyGenerator] = None,
    ):
        """
        Construct a repository.

        Args:
            session: Database session to stage changes against
            model: Mapped entity class
            key_type: Key type; inferred from the ``id`` column when omitted
            key_generator: Overrides the strategy chosen from ``key_type``
        """
        self.session = session
        self.model = model
        self.key_type = key_type or resolve_key_type(model)
        self.key_generator = key_generator or key_generator_for(self.key_type)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(model={self.model.__name__}, key_type={self.key_type.__name__})>"

    # ========================================
    # Select
    # ========================================

    def get(self, key: K) -> Optional[T]:
        """
        Retrieve a record by its key.

        Only records the database can see are found: with autoflush off,
        a record staged by ``insert`` is not visible until ``commit``.

        Returns:
            The record, or None if no record has this key
        """
        return self.session.query(self.model).filter(self.model.id == key).first()

    async def get_async(self, key: K) -> Optional[T]:
        return await asyncio.to_thread(self.get, key)

    def get_all(self) -> Query:
        """
        Every record, as a query that has not run yet.

        Example:
            recent = repo.get_all().filter(Invoice.total > 100).order_by(Invoice.id).all()
        """
        return self.session.query(self.model)

    async def get_all_async(self) -> List[T]:
        return await asyncio.to_thread(lambda: self.get_all().all())

    # ========================================
    # Insert
    # ========================================

    def insert(self, record: T) -> None:
        """Stage a record for insertion, generating its key if needed."""
        self.key_generator.assign([record])
        self.session.add(record)
        logger.debug("Staged insert of %s %s", self.model.__name__, record.id)

    async def insert_async(self, record: T) -> None:
        await asyncio.to_thread(self.insert, record)

    def insert_many(self, records: Iterable[T]) -> None:
        """Stage many records for insertion."""
        records = list(records)
        self.key_generator.assign(records)
        self.session.add_all(records)
        logger.debug("Staged insert of %d %s records", len(records), self.model.__name__)

    async def insert_many_async(self, records: Iterable[T]) -> None:
        await asyncio.to_thread(self.insert_many, records)

    # ========================================
    # Update
    # ========================================

    def update(self, record: T) -> None:
        """
        Stage a record as modified.

        A record loaded through this session is already tracked, so its
        changes are picked up on commit. A detached or newly built record
        is merged: its state is copied onto the tracked instance with the
        same key, or staged as new if the key is unknown. A new record
        without a key gets one from the key generator first.
        """
        if record not in self.session:
            if not has_identity(record) and record.id is None:
                self.key_generator.assign([record])
            self.session.merge(record)
        logger.debug("Staged update of a %s record", self.model.__name__)

    async def update_async(self, record: T) -> None:
        await asyncio.to_thread(self.update, record)

    def update_many(self, records: Iterable[T]) -> None:
        for record in records:
            self.update(record)

    async def update_many_async(self, records: Iterable[T]) -> None:
        await asyncio.to_thread(self.update_many, records)

    # ========================================
    # Delete
    # ========================================

    def delete(self, record: T) -> None:
        """
        Stage a tracked record for removal.

        A record that was inserted but never committed is simply dropped
        from the session.
        """
        if record in self.session.new:
            self.session.expunge(record)
        else:
            self.session.delete(record)
        logger.debug("Staged delete of a %s record", self.model.__name__)

    async def delete_async(self, record: T) -> None:
        await asyncio.to_thread(self.delete, record)

    def delete_many(self, records: Iterable[T]) -> None:
        for record in records:
            self.delete(record)

    async def delete_many_async(self, records: Iterable[T]) -> None:
        await asyncio.to_thread(self.delete_many, records)

    def delete_by_key(self, key: K) -> None:
        """Stage removal of the record with this key. Unknown keys are ignored."""
        record = self.get(key)
        if record is not None:
            self.delete(record)

    async def delete_by_key_async(self, key: K) -> None:
        record = await self.get_async(key)
        if record is not None:
            await self.delete_async(record)

    def _find_many(self, keys: List[K]) -> List[T]:
        if not keys:
            return []
        return self.session.query(self.model).filter(self.model.id.in_(keys)).all()

    def delete_many_by_key(self, keys: Iterable[K]) -> None:
        """Stage removal of every record whose key is listed. Unknown keys are ignored."""
        records = self._find_many(list(keys))
        if records:
            self.delete_many(records)

    async def delete_many_by_key_async(self, keys: Iterable[K]) -> None:
        records = await asyncio.to_thread(self._find_many, list(keys))
        if records:
            await self.delete_many_async(records)

    # ========================================
    # Transactions
    # ========================================

    def commit(self) -> None:
        """
        Commit staged changes to the database.

        Raises:
            SQLAlchemyError: Whatever the database reported; the session
                is left for its owner to roll back
        """
        try:
            self.session.commit()
        except SQLAlchemyError:
            logger.exception("Failed to commit %s changes", self.model.__name__)
            raise

    async def commit_async(self) -> None:
        await asyncio.to_thread(self.commit)

    # ========================================
    # Reload
    # ========================================

    def reload(self, record: T) -> None:
        """Not supported."""
        raise NotImplementedError(f"{type(self).__name__} does not support reload")

    async def reload_async(self, record: T) -> None:
        raise NotImplementedError(f"{type(self).__name__} does not support reload")
