"""Tests for name and type rewriting."""
from fintrack.generators.entity_gen.classify import classify
from fintrack.generators.entity_gen.transform import (
    strip_id_suffix,
    transform_field,
    visible_name,
    visible_type,
)
from fintrack.generators.entity_gen.types import FieldSpec, FieldType, Flag, wrap_optional


def _field(name, field_type, *flags):
    return FieldSpec(name=name, declared_type=field_type, flags=frozenset(flags))


def test_wrap_optional_is_idempotent():
    for base in ("int", "str", "datetime", "EntryType"):
        once = wrap_optional(FieldType(base))
        assert once == FieldType(base, optional=True)
        assert wrap_optional(once) == once


def test_strip_id_suffix():
    assert strip_id_suffix("category_id") == "category"
    assert strip_id_suffix("category") == "category"
    assert strip_id_suffix("identity") == "identity"
    assert strip_id_suffix("id_card") == "id_card"
    assert strip_id_suffix("_id") == "_id"


def test_visible_name_strips_only_with_flag():
    assert visible_name(_field("x_id", FieldType("int"), Flag.REPRESENTABLE_AS_STRING)) == "x"
    assert visible_name(_field("x", FieldType("int"), Flag.REPRESENTABLE_AS_STRING)) == "x"
    assert visible_name(_field("x_id", FieldType("int"))) == "x_id"


def test_visible_type_preserves_optionality():
    assert visible_type(_field("a_id", FieldType("int"), Flag.REPRESENTABLE_AS_STRING)) == FieldType("str")
    assert visible_type(
        _field("a_id", FieldType("int", optional=True), Flag.REPRESENTABLE_AS_STRING)
    ) == FieldType("str", optional=True)
    assert visible_type(_field("a", FieldType("float"))) == FieldType("float")


def test_representable_field_plan():
    """Persistence shapes keep the declared name and type, user-facing shapes use the string form."""
    field = _field("category_id", FieldType("int"), Flag.REPRESENTABLE_AS_STRING)
    plan = transform_field(field, classify(field.flags))

    assert (plan.create.name, plan.create.type) == ("category_id", FieldType("int"))
    assert (plan.create_request.name, plan.create_request.type) == ("category", FieldType("str"))
    assert (plan.update.name, plan.update.type) == ("category_id", FieldType("int", True))
    assert (plan.update_request.name, plan.update_request.type) == ("category", FieldType("str", True))
    assert (plan.response.name, plan.response.type) == ("category", FieldType("str"))


def test_has_default_boundary():
    """HasDefault makes the create shapes optional but never the response."""
    field = _field("count", FieldType("int"), Flag.HAS_DEFAULT)
    plan = transform_field(field, classify(field.flags))

    assert plan.create.type == FieldType("int", True)
    assert plan.create_request.type == FieldType("int", True)
    assert plan.update.type == FieldType("int", True)
    assert plan.update_request.type == FieldType("int", True)
    assert plan.response.type == FieldType("int")


def test_has_default_with_representable_as_string():
    field = _field("created_at", FieldType("datetime"), Flag.HAS_DEFAULT, Flag.REPRESENTABLE_AS_STRING)
    plan = transform_field(field, classify(field.flags))

    assert plan.create.type == FieldType("datetime", True)
    assert plan.create_request.type == FieldType("str", True)
    assert plan.update_request.type == FieldType("str", True)
    assert plan.response.type == FieldType("str")


def test_already_optional_is_not_double_wrapped():
    field = _field("note", FieldType("str", True), Flag.HAS_DEFAULT)
    plan = transform_field(field, classify(field.flags))

    for shape_field in (plan.create, plan.create_request, plan.update, plan.update_request, plan.response):
        assert shape_field.type == FieldType("str", True)


def test_excluded_shapes_are_none():
    field = _field("id", FieldType("int"), Flag.ID, Flag.NOT_SETTABLE, Flag.NOT_VIEWABLE, Flag.NOT_UPDATABLE)
    plan = transform_field(field, classify(field.flags))

    assert plan.create is None
    assert plan.create_request is None
    assert plan.update is None
    assert plan.update_request is None
    assert plan.response is None
