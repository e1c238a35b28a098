"""
Collection-style persistence over an async SQLAlchemy engine.

A single ``DocumentStore`` is created at process start. It owns the engine
(and therefore the connection pool); every collection operation acquires a
session from the pool and releases it when the operation finishes.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError

from reddit_api.models import Base, CommentORM, PostORM, SubredditORM
from reddit_api.utils.db_health import check_db_connection
from reddit_api.utils.db_session import build_async_engine, build_session_factory, session_scope

logger = logging.getLogger(__name__)

COLLECTIONS: Dict[str, Type[Base]] = {
    "subreddits": SubredditORM,
    "posts": PostORM,
    "comments": CommentORM,
}


class DuplicateKeyError(Exception):
    """Raised when an insert violates a unique key."""


@dataclass(frozen=True)
class InsertOneResult:
    inserted_id: Any


@dataclass(frozen=True)
class UpdateResult:
    matched_count: int


class Collection:
    """Find/insert/update primitives for one ORM-backed collection."""

    def __init__(self, store: "DocumentStore", model: Type[Base]):
        self._store = store
        self.model = model

    def _conditions(self, criteria: Dict[str, Any]) -> list:
        return [getattr(self.model, field) == value for field, value in criteria.items()]

    async def find_one(self, **criteria: Any) -> Optional[Base]:
        async with self._store.session() as session:
            result = await session.execute(
                select(self.model).where(*self._conditions(criteria)).limit(1)
            )
            return result.scalars().first()

    async def find(self, **criteria: Any) -> List[Base]:
        """Return every matching document in insertion order."""
        async with self._store.session() as session:
            result = await session.execute(
                select(self.model).where(*self._conditions(criteria)).order_by(self.model.id)
            )
            return list(result.scalars().all())

    async def insert_one(self, document: Dict[str, Any]) -> InsertOneResult:
        instance = self.model(**document)
        try:
            async with self._store.session() as session:
                session.add(instance)
                await session.flush()
                inserted_id = instance.id
        except IntegrityError as e:
            raise DuplicateKeyError(str(e.orig)) from e
        logger.debug(f"Inserted {self.model.__tablename__} document {inserted_id}")
        return InsertOneResult(inserted_id=inserted_id)

    async def update_one(self, criteria: Dict[str, Any], values: Dict[str, Any]) -> UpdateResult:
        async with self._store.session() as session:
            result = await session.execute(
                update(self.model)
                .where(*self._conditions(criteria))
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            return UpdateResult(matched_count=result.rowcount)


class DocumentStore:
    """Process-wide handle to the backing database."""

    def __init__(self, database_url: str, echo: bool = False, **engine_kwargs: Any):
        self.engine = build_async_engine(database_url, echo=echo, **engine_kwargs)
        self._session_factory = build_session_factory(self.engine)
        self._collections = {name: Collection(self, model) for name, model in COLLECTIONS.items()}

    def session(self):
        return session_scope(self._session_factory)

    def collection(self, name: str) -> Collection:
        return self._collections[name]

    async def connect(self, create_schema: bool = False) -> None:
        """
        Verify connectivity and optionally create the collections.

        Raises:
            SQLAlchemyError: If the database cannot be reached.
        """
        async with self.engine.begin() as conn:
            if create_schema:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Connected successfully to database")

    async def ping(self) -> bool:
        return await check_db_connection(self.engine)

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")
