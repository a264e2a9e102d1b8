"""Field copying between Pydantic DTOs and SQLAlchemy entities."""
from typing import Type, TypeVar

from pydantic import BaseModel
from sqlalchemy import inspect

SchemaT = TypeVar("SchemaT", bound=BaseModel)
ModelT = TypeVar("ModelT")


def to_entity(dto: BaseModel, model_cls: Type[ModelT], **overrides) -> ModelT:
    """Build an unsaved entity from the DTO fields that are columns of ``model_cls``.

    Primary keys are never copied; ``overrides`` set extra columns such as
    foreign keys taken from nested references.
    """
    mapper = inspect(model_cls)
    columns = {column.key for column in mapper.column_attrs}
    primary_keys = {column.key for column in mapper.primary_key}

    values = {
        key: value
        for key, value in dto.model_dump().items()
        if key in columns and key not in primary_keys
    }
    values.update(overrides)
    return model_cls(**values)


def to_dto(entity, schema_cls: Type[SchemaT]) -> SchemaT:
    return schema_cls.model_validate(entity, from_attributes=True)
