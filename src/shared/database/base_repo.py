import abc
from typing import Generic, TypeVar, Optional

from sqlalchemy import Executable

from src.shared.database.base_mapper import BaseEntityMapper
from src.shared.database.database import Database, STORE_ERRORS
from src.shared.exceptions import StoreFailure


TEntity = TypeVar("TEntity")
TModel = TypeVar("TModel")


class BaseRepository(abc.ABC, Generic[TEntity, TModel]):
    def __init__(self, db: Database, mapper: BaseEntityMapper[TModel, TEntity]):
        self.db = db
        self.mapper = mapper

    async def find_one(self, statement: Executable) -> Optional[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entity = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            raise StoreFailure("load record", e) from e
        if entity is None:
            return None
        return self.mapper.to_model(entity)

    async def find_all(self, statement: Executable) -> list[TModel]:
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                entities = list(result.scalars().all())
        except STORE_ERRORS as e:
            raise StoreFailure("load records", e) from e
        return self.mapper.to_models(entities)

    async def count(self, statement: Executable) -> int:
        """
        Execute a counting query returning a single scalar.

        Args:
            statement: SQLAlchemy select statement returning one integer

        Returns:
            The count, 0 when the query yields no row
        """
        try:
            async with self.db.session_maker() as session:
                result = await session.execute(statement)
                value = result.scalar_one_or_none()
        except STORE_ERRORS as e:
            raise StoreFailure("count records", e) from e
        return int(value or 0)
