"""Dataclasses for entity derivation."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple


class Flag(str, Enum):
    """Per-field capability flags controlling shape membership and rewriting."""
    NOT_UPDATABLE = "NotUpdatable"
    NOT_VIEWABLE = "NotViewable"
    HAS_DEFAULT = "HasDefault"
    NOT_SETTABLE = "NotSettable"
    ID = "Id"
    REPRESENTABLE_AS_STRING = "RepresentableAsString"


@dataclass(frozen=True)
class FieldType:
    """A declared type: either Plain(base) or Optional(base)."""
    base: str
    optional: bool = False

    def annotation(self) -> str:
        if self.optional:
            return f"Optional[{self.base}]"
        return self.base


def wrap_optional(field_type: FieldType) -> FieldType:
    """Wrap a type in Optional. Already-optional types are returned as-is."""
    if field_type.optional:
        return field_type
    return FieldType(base=field_type.base, optional=True)


@dataclass(frozen=True)
class FieldSpec:
    """A canonical entity field."""
    name: str
    declared_type: FieldType
    flags: FrozenSet[Flag] = frozenset()


@dataclass(frozen=True)
class EntityDefinition:
    """Canonical entity definition, the compiler's sole input."""
    name: str
    storage_location: str
    fields: Tuple[FieldSpec, ...]
    enums: Dict[str, Tuple[str, ...]] = field(default_factory=dict)


@dataclass(frozen=True)
class Classification:
    """Shape membership decisions for a single field."""
    include_in_create: bool = True
    include_in_create_request: bool = True
    include_in_update: bool = True
    include_in_update_request: bool = True
    include_in_response: bool = True
    wrap_optional_on_create: bool = False


@dataclass(frozen=True)
class ShapeField:
    name: str
    type: FieldType


@dataclass(frozen=True)
class FieldPlan:
    """Name and type of one field in each of the five shapes (None if excluded)."""
    create: Optional[ShapeField]
    create_request: Optional[ShapeField]
    update: Optional[ShapeField]
    update_request: Optional[ShapeField]
    response: Optional[ShapeField]


@dataclass(frozen=True)
class ShapeNames:
    create: str
    create_request: str
    update: str
    update_request: str
    response: str


@dataclass(frozen=True)
class DerivedShape:
    """One generated type definition."""
    name: str
    fields: Tuple[ShapeField, ...]
    storage_location: Optional[str] = None  # set on persistence-facing shapes only


@dataclass(frozen=True)
class DerivedShapes:
    """The five shapes derived from one entity."""
    entity_name: str
    create: DerivedShape
    create_request: DerivedShape
    update: DerivedShape
    update_request: DerivedShape
    response: DerivedShape
    enums: Dict[str, Tuple[str, ...]] = field(default_factory=dict)

    def all(self) -> Tuple[DerivedShape, ...]:
        return (self.create, self.create_request, self.update, self.update_request, self.response)


@dataclass
class GeneratedFile:
    """Represents a generated file."""
    path: str  # Relative path from output directory
    content: str  # File contents
