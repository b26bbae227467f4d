"""Tests for building live Pydantic models from derived shapes."""
import pytest
from pathlib import Path
from pydantic import ValidationError
from fintrack.generators.entity_gen.derive import derive_shapes
from fintrack.generators.entity_gen.errors import InvalidEntityDefinition
from fintrack.generators.entity_gen.ingest import ingest_entity
from fintrack.generators.entity_gen.loader import load_entities
from fintrack.generators.entity_gen.models import PersistenceModel, build_models
from fintrack.generators.entity_gen.types import DerivedShape, DerivedShapes, FieldType, ShapeField

ENTITIES_DIR = Path(__file__).parent.parent / "entities"


def _widget_models():
    return build_models(derive_shapes(ingest_entity({
        "name": "Widget",
        "table_name": "widgets",
        "fields": [
            {"name": "id", "type": "int", "flags": ["NotUpdatable", "NotViewable", "NotSettable", "Id"]},
            {"name": "label", "type": "str"},
            {"name": "count", "type": "int", "flags": ["HasDefault"]},
        ],
    })))


def test_build_models_names_and_order():
    models = _widget_models()
    assert list(models) == [
        "NewWidget",
        "CreateWidgetRequest",
        "UpdateWidget",
        "UpdateWidgetRequest",
        "WidgetResponse",
    ]


def test_persistence_models_are_bound():
    models = _widget_models()
    assert issubclass(models["NewWidget"], PersistenceModel)
    assert models["NewWidget"].__tablename__ == "widgets"
    assert models["UpdateWidget"].__tablename__ == "widgets"
    assert not issubclass(models["CreateWidgetRequest"], PersistenceModel)


def test_model_field_requirements():
    models = _widget_models()

    new = models["NewWidget"](label="bolt")
    assert new.count is None
    assert "id" not in models["NewWidget"].model_fields

    assert models["UpdateWidget"]().model_dump() == {"label": None, "count": None}

    response = models["WidgetResponse"](label="bolt", count=3)
    assert response.model_dump() == {"label": "bolt", "count": 3}
    with pytest.raises(ValidationError):
        models["WidgetResponse"](label="bolt")


def test_entry_models_validate_enum():
    entity = next(e for e in load_entities(ENTITIES_DIR) if e.name == "Entry")
    models = build_models(derive_shapes(entity))

    update = models["UpdateEntryRequest"](entry_type="Income")
    assert update.entry_type.value == "Income"
    with pytest.raises(ValidationError):
        models["UpdateEntryRequest"](entry_type="Gift")


def test_unknown_type_is_rejected():
    shape = DerivedShape("GadgetResponse", (ShapeField("shape", FieldType("Polygon")),))
    shapes = DerivedShapes(
        entity_name="Gadget",
        create=DerivedShape("NewGadget", (), "gadgets"),
        create_request=DerivedShape("CreateGadgetRequest", ()),
        update=DerivedShape("UpdateGadget", (), "gadgets"),
        update_request=DerivedShape("UpdateGadgetRequest", ()),
        response=shape,
    )
    with pytest.raises(InvalidEntityDefinition) as exc_info:
        build_models(shapes)
    assert exc_info.value.field == "shape"
