"""Schema ingestion: turn raw entity mappings into EntityDefinition objects."""
import keyword
import logging
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple
from fintrack.core.config import settings
from fintrack.core.workflow import DerivationStage
from fintrack.generators.entity_gen.classify import classify
from fintrack.generators.entity_gen.errors import (
    DuplicateField,
    InvalidEntityDefinition,
    MissingStorageLocation,
    NonNamedField,
    UnknownFlag,
    VisibleNameCollision,
)
from fintrack.generators.entity_gen.models import BUILTIN_TYPES
from fintrack.generators.entity_gen.transform import visible_name, visible_type
from fintrack.generators.entity_gen.types import EntityDefinition, FieldSpec, FieldType, Flag

log = logging.getLogger(__name__)

KNOWN_FLAGS = {flag.value: flag for flag in Flag}
EXPECTED_FLAGS = ", ".join(flag.value for flag in Flag)

_OPTIONAL_BRACKET = re.compile(r"^Optional\[(?P<inner>.+)\]$")
_OPTIONAL_UNION = re.compile(r"^(?:(?P<left>.+?)\s*\|\s*None|None\s*\|\s*(?P<right>.+))$")

# Names the rendered model module binds at module level
RENDER_NAMES = {"Optional", "ClassVar", "BaseModel", "Enum"}


def parse_field_type(raw_type: str, nullable: bool = False) -> FieldType:
    """
    Parse a declared type string.

    `Optional[X]`, `X | None` and `None | X` are optional; so is any type when
    the field sets `nullable`.
    """
    text = raw_type.strip()
    match = _OPTIONAL_BRACKET.match(text)
    if match:
        return FieldType(base=match.group("inner").strip(), optional=True)
    match = _OPTIONAL_UNION.match(text)
    if match:
        inner = match.group("left") or match.group("right")
        return FieldType(base=inner.strip(), optional=True)
    return FieldType(base=text, optional=nullable)


def _parse_flags(entity_name: str, field_name: str, raw_flags: Any) -> frozenset:
    if raw_flags is None:
        return frozenset()
    if isinstance(raw_flags, str) or not isinstance(raw_flags, (list, tuple)):
        raise InvalidEntityDefinition(entity_name, "flags must be a list", field=field_name)
    flags = set()
    for token in raw_flags:
        flag = KNOWN_FLAGS.get(token) if isinstance(token, str) else None
        if flag is None:
            raise UnknownFlag(entity_name, field_name, str(token), EXPECTED_FLAGS)
        flags.add(flag)
    return frozenset(flags)


def _check_python_name(entity_name: str, field_name: str, name: str, role: str) -> None:
    # Keywords do not compile and leading underscores become private attributes in pydantic
    if keyword.iskeyword(name) or name.startswith("_"):
        raise InvalidEntityDefinition(
            entity_name, f"{role} '{name}' cannot be used as a model field", field=field_name,
        )


def _parse_field(entity_name: str, position: int, raw_field: Any) -> FieldSpec:
    # Positional (tuple-style) entries cannot be named
    if not isinstance(raw_field, Mapping):
        raise NonNamedField(entity_name, position)
    name = raw_field.get("name")
    if not isinstance(name, str) or not name.strip():
        raise NonNamedField(entity_name, position)
    name = name.strip()
    if not name.isidentifier():
        raise InvalidEntityDefinition(entity_name, "Field name is not a valid identifier", field=name)
    _check_python_name(entity_name, name, name, "Field name")

    raw_type = raw_field.get("type")
    if not isinstance(raw_type, str) or not raw_type.strip():
        raise InvalidEntityDefinition(entity_name, "Field has no type", field=name)

    nullable = raw_field.get("nullable", False)
    if not isinstance(nullable, bool):
        raise InvalidEntityDefinition(entity_name, "nullable must be true or false", field=name)

    field = FieldSpec(
        name=name,
        declared_type=parse_field_type(raw_type, nullable=nullable),
        flags=_parse_flags(entity_name, name, raw_field.get("flags")),
    )
    _check_python_name(entity_name, name, visible_name(field), "Visible name")
    return field


def _parse_enums(entity_name: str, raw_enums: Any) -> Dict[str, Tuple[str, ...]]:
    if raw_enums is None:
        return {}
    if not isinstance(raw_enums, Mapping):
        raise InvalidEntityDefinition(entity_name, "enums must be a mapping of name to members")
    enums = {}
    for enum_name, members in raw_enums.items():
        if not isinstance(members, (list, tuple)) or not members:
            raise InvalidEntityDefinition(entity_name, f"Enum '{enum_name}' must list its members")
        enum_name = str(enum_name)
        members = tuple(str(member) for member in members)
        names = (enum_name,) + members
        if not all(n.isidentifier() and not keyword.iskeyword(n) and not n.startswith("_") for n in names):
            raise InvalidEntityDefinition(entity_name, f"Enum '{enum_name}' names must be identifiers")
        if enum_name in BUILTIN_TYPES or enum_name in RENDER_NAMES:
            raise InvalidEntityDefinition(entity_name, f"Enum '{enum_name}' shadows a built-in name")
        enums[enum_name] = members
    return enums


def _check_types(entity_name: str, fields: List[FieldSpec], enums: Dict[str, Tuple[str, ...]]) -> None:
    known = set(BUILTIN_TYPES) | set(enums)
    used = set()
    for field in fields:
        base = field.declared_type.base
        if base not in known:
            raise InvalidEntityDefinition(entity_name, f"Unknown type '{base}'", field=field.name)
        used.add(base)
        used.add(visible_type(field).base)

    # A field named after a type the module uses would shadow it inside the class body
    reserved = used | RENDER_NAMES
    for field in fields:
        for name in {field.name, visible_name(field)}:
            if name in reserved:
                raise InvalidEntityDefinition(
                    entity_name, f"Field name '{name}' shadows a type used by the entity", field=field.name,
                )


def _check_visible_names(entity_name: str, fields: List[FieldSpec]) -> None:
    create_request: Dict[str, str] = {}
    update_request: Dict[str, str] = {}
    response: Dict[str, str] = {}
    for field in fields:
        shapes = classify(field.flags)
        shown = visible_name(field)
        for included, seen in (
            (shapes.include_in_create_request, create_request),
            (shapes.include_in_update_request, update_request),
            (shapes.include_in_response, response),
        ):
            if not included:
                continue
            other = seen.get(shown)
            if other is not None:
                raise VisibleNameCollision(entity_name, field.name, shown, other)
            seen[shown] = field.name


def ingest_entity(raw: Mapping[str, Any], warn_id_without_not_settable: Optional[bool] = None) -> EntityDefinition:
    """
    Build an EntityDefinition from a raw mapping.

    Args:
        raw: Mapping with `name`, `table_name`, `fields` and optional `enums`
        warn_id_without_not_settable: Override for the settings toggle

    Returns:
        EntityDefinition

    Raises:
        EntityDerivationError: on the first malformed element; nothing partial is returned
    """
    if not isinstance(raw, Mapping):
        raise InvalidEntityDefinition("<unknown>", "Entity definition must be a mapping")

    entity_name = raw.get("name")
    if not isinstance(entity_name, str) or not entity_name.isidentifier():
        raise InvalidEntityDefinition(str(entity_name or "<unknown>"), "Entity name must be an identifier")

    storage_location = raw.get("table_name")
    if not isinstance(storage_location, str) or not storage_location.strip():
        raise MissingStorageLocation(entity_name)

    raw_fields = raw.get("fields")
    if not isinstance(raw_fields, (list, tuple)):
        raise InvalidEntityDefinition(entity_name, "fields must be a list")

    fields: List[FieldSpec] = []
    names = set()
    for position, raw_field in enumerate(raw_fields):
        field = _parse_field(entity_name, position, raw_field)
        if field.name in names:
            raise DuplicateField(entity_name, field.name)
        names.add(field.name)
        fields.append(field)

    enums = _parse_enums(entity_name, raw.get("enums"))
    _check_types(entity_name, fields, enums)
    _check_visible_names(entity_name, fields)

    if warn_id_without_not_settable is None:
        warn_id_without_not_settable = settings.warn_id_without_not_settable
    if warn_id_without_not_settable:
        for field in fields:
            if Flag.ID in field.flags and Flag.NOT_SETTABLE not in field.flags:
                log.warning(
                    "Field %s is flagged Id without NotSettable and will appear in %s requests",
                    field.name, entity_name,
                    extra={"entity": entity_name, "stage": DerivationStage.INGEST.value},
                )

    return EntityDefinition(
        name=entity_name,
        storage_location=storage_location.strip(),
        fields=tuple(fields),
        enums=enums,
    )
