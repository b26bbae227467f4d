"""Build live Pydantic models from derived shapes."""
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Optional, Type
from pydantic import BaseModel, create_model
from fintrack.generators.entity_gen.errors import InvalidEntityDefinition
from fintrack.generators.entity_gen.types import DerivedShape, DerivedShapes, FieldType


BUILTIN_TYPES: Dict[str, Any] = {
    "int": int,
    "float": float,
    "str": str,
    "bool": bool,
    "datetime": datetime,
    "date": date,
    "Decimal": Decimal,
}


class PersistenceModel(BaseModel):
    """Base for models bound to a storage location."""
    __tablename__: ClassVar[str] = ""


def _type_registry(shapes: DerivedShapes) -> Dict[str, Any]:
    registry = dict(BUILTIN_TYPES)
    for name, members in shapes.enums.items():
        registry[name] = Enum(name, {member: member for member in members}, type=str)
    return registry


def _resolve(entity: str, field: str, field_type: FieldType, registry: Dict[str, Any]) -> Any:
    base = registry.get(field_type.base)
    if base is None:
        raise InvalidEntityDefinition(entity, f"Unknown type '{field_type.base}'", field=field)
    if field_type.optional:
        return Optional[base]
    return base


def _build_model(shapes: DerivedShapes, shape: DerivedShape, registry: Dict[str, Any]) -> Type[BaseModel]:
    definitions = {}
    for field in shape.fields:
        annotation = _resolve(shapes.entity_name, field.name, field.type, registry)
        default = None if field.type.optional else ...
        definitions[field.name] = (annotation, default)

    if shape.storage_location is None:
        return create_model(shape.name, **definitions)

    model = create_model(shape.name, __base__=PersistenceModel, **definitions)
    model.__tablename__ = shape.storage_location
    return model


def build_models(shapes: DerivedShapes) -> Dict[str, Type[BaseModel]]:
    """
    Create Pydantic model classes for all five shapes.

    Returns:
        Mapping of shape name to model class, in shape order
    """
    registry = _type_registry(shapes)
    return {shape.name: _build_model(shapes, shape, registry) for shape in shapes.all()}
