"""Name and type rewriting for a single field."""
from fintrack.generators.entity_gen.types import (
    Classification,
    FieldPlan,
    FieldSpec,
    FieldType,
    Flag,
    ShapeField,
    wrap_optional,
)

ID_SUFFIX = "_id"
STRING_TYPE = "str"


def strip_id_suffix(name: str) -> str:
    """Drop a trailing `_id` (category_id -> category)."""
    if name.endswith(ID_SUFFIX) and len(name) > len(ID_SUFFIX):
        return name[: -len(ID_SUFFIX)]
    return name


def visible_name(field: FieldSpec) -> str:
    """Name of the field in user-facing shapes."""
    if Flag.REPRESENTABLE_AS_STRING in field.flags:
        return strip_id_suffix(field.name)
    return field.name


def visible_type(field: FieldSpec) -> FieldType:
    """Type of the field in user-facing shapes, before any create-side wrapping."""
    if Flag.REPRESENTABLE_AS_STRING in field.flags:
        return FieldType(base=STRING_TYPE, optional=field.declared_type.optional)
    return field.declared_type


def transform_field(field: FieldSpec, classification: Classification) -> FieldPlan:
    """
    Work out the name and type the field takes in each derived shape.

    The response keeps the visible type as-is; HasDefault only affects the
    create shapes. Update shapes always wrap, since an omitted field means
    "leave unchanged".
    """
    name = visible_name(field)
    shown = visible_type(field)

    response = ShapeField(name, shown)

    if classification.wrap_optional_on_create:
        request_type = wrap_optional(shown)
        create_type = wrap_optional(field.declared_type)
    else:
        request_type = shown
        create_type = field.declared_type

    return FieldPlan(
        create=ShapeField(field.name, create_type) if classification.include_in_create else None,
        create_request=ShapeField(name, request_type) if classification.include_in_create_request else None,
        update=(
            ShapeField(field.name, wrap_optional(field.declared_type))
            if classification.include_in_update else None
        ),
        update_request=(
            ShapeField(name, wrap_optional(request_type))
            if classification.include_in_update_request else None
        ),
        response=response if classification.include_in_response else None,
    )
