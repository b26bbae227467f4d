"""Shape emission: assemble the five derived shapes for an entity."""
import logging
from typing import List
from fintrack.core.workflow import DerivationStage
from fintrack.generators.entity_gen.classify import classify
from fintrack.generators.entity_gen.transform import transform_field
from fintrack.generators.entity_gen.types import (
    DerivedShape,
    DerivedShapes,
    EntityDefinition,
    ShapeField,
)
from fintrack.generators.entity_gen.utils import shape_names

log = logging.getLogger(__name__)


def derive_shapes(entity: EntityDefinition) -> DerivedShapes:
    """
    Derive New<Name>, Create<Name>Request, Update<Name>, Update<Name>Request
    and <Name>Response from a canonical entity definition.

    Args:
        entity: Ingested entity definition

    Returns:
        DerivedShapes holding all five shapes, fields in declaration order
    """
    create: List[ShapeField] = []
    create_request: List[ShapeField] = []
    update: List[ShapeField] = []
    update_request: List[ShapeField] = []
    response: List[ShapeField] = []

    for field in entity.fields:
        plan = transform_field(field, classify(field.flags))
        for target, shape_field in (
            (create, plan.create),
            (create_request, plan.create_request),
            (update, plan.update),
            (update_request, plan.update_request),
            (response, plan.response),
        ):
            if shape_field is not None:
                target.append(shape_field)

    names = shape_names(entity.name)
    shapes = DerivedShapes(
        entity_name=entity.name,
        create=DerivedShape(names.create, tuple(create), entity.storage_location),
        create_request=DerivedShape(names.create_request, tuple(create_request)),
        update=DerivedShape(names.update, tuple(update), entity.storage_location),
        update_request=DerivedShape(names.update_request, tuple(update_request)),
        response=DerivedShape(names.response, tuple(response)),
        enums=dict(entity.enums),
    )
    log.debug(
        "Derived shapes %s",
        ", ".join(f"{s.name}({len(s.fields)})" for s in shapes.all()),
        extra={"entity": entity.name, "stage": DerivationStage.DERIVE.value},
    )
    return shapes
