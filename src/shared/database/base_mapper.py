import abc
from typing import Generic, Iterable, TypeVar


TModel = TypeVar("TModel")
TEntity = TypeVar("TEntity")


class BaseEntityMapper(abc.ABC, Generic[TModel, TEntity]):
    """Two-way conversion between a domain model and its SQLAlchemy entity."""

    @staticmethod
    @abc.abstractmethod
    def to_entity(model_instance: TModel) -> TEntity:
        pass

    @staticmethod
    @abc.abstractmethod
    def to_model(entity: TEntity) -> TModel:
        pass

    def to_models(self, entities: Iterable[TEntity]) -> list[TModel]:
        return [self.to_model(entity) for entity in entities]
