from typing import Any

from sqlalchemy import delete as sql_delete, inspect, update as sql_update
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.database.database import Database, STORE_ERRORS
from src.shared.database.entity_mapper import EntityMapper
from src.shared.exceptions import EntityNotFound, StoreFailure


class UnitOfWork:
    def __init__(
        self,
        db: Database,
        entity_mapper: EntityMapper,
    ) -> None:
        self.db = db
        self.session: AsyncSession
        self.entity_mapper = entity_mapper

    async def __aenter__(self):
        self.session = self.db.session_maker()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        try:
            if exc_type is None:
                await self.commit()
            else:
                await self.rollback()
        finally:
            if self.session:
                await self.session.close()

    def _map_to_entity(self, model_instance: Any):
        return self.entity_mapper.map_to_entity(model_instance)

    def add(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        self.session.add(entity)

    async def update(self, model_instance: Any):
        # Plain UPDATE by primary key: a row deleted since it was read is not re-inserted
        entity_type, key, entity = self._keyed_entity(model_instance)
        mapper = inspect(entity_type)
        values = {attr.key: getattr(entity, attr.key) for attr in mapper.column_attrs if attr.key not in key}
        statement = sql_update(entity_type).filter_by(**key).values(**values)
        await self._execute_keyed(statement, model_instance, key, "update record")

    async def delete(self, model_instance: Any):
        entity_type, key, _ = self._keyed_entity(model_instance)
        statement = sql_delete(entity_type).filter_by(**key)
        await self._execute_keyed(statement, model_instance, key, "delete record")

    def _keyed_entity(self, model_instance: Any):
        entity = self._map_to_entity(model_instance)
        entity_type = type(entity)
        key = {column.key: getattr(entity, column.key) for column in inspect(entity_type).primary_key}
        return entity_type, key, entity

    async def _execute_keyed(self, statement, model_instance: Any, key: dict[str, Any], operation: str):
        try:
            result = await self.session.execute(statement)
        except STORE_ERRORS as e:
            raise StoreFailure(operation, e) from e
        if result.rowcount == 0:
            raise EntityNotFound(type(model_instance).__name__, ", ".join(str(v) for v in key.values()))

    async def commit(self):
        try:
            await self.session.commit()
        except STORE_ERRORS as e:
            await self.rollback()
            raise StoreFailure("commit changes", e) from e

    async def rollback(self):
        await self.session.rollback()
