from fastapi import APIRouter, HTTPException
from fintrack.generators.entity_gen.derive import derive_shapes
from fintrack.generators.entity_gen.errors import EntityDerivationError
from fintrack.generators.entity_gen.ingest import ingest_entity
from fintrack.generators.entity_gen.render import render_entity_models
from fintrack.generators.entity_gen.types import DerivedShapes
from fintrack.generators.entity_gen.utils import to_snake_case
from fintrack.schemas.entities import (
    DerivationErrorDetail,
    DerivedShapesResponse,
    EntityDefinitionRequest,
    RenderedModuleResponse,
    ShapeFieldResponse,
    ShapeResponse,
)

router = APIRouter(prefix="/entities")


def _derive(req: EntityDefinitionRequest) -> DerivedShapes:
    try:
        return derive_shapes(ingest_entity(req.model_dump()))
    except EntityDerivationError as e:
        detail = DerivationErrorDetail(entity=e.entity, field=e.field, message=e.message)
        raise HTTPException(status_code=422, detail=detail.model_dump())

@router.post("/derive", response_model=DerivedShapesResponse)
def derive_entity(req: EntityDefinitionRequest):
    shapes = _derive(req)
    return DerivedShapesResponse(
        entity=shapes.entity_name,
        shapes=[
            ShapeResponse(
                name=shape.name,
                storage_location=shape.storage_location,
                fields=[ShapeFieldResponse(name=f.name, type=f.type.annotation()) for f in shape.fields],
            )
            for shape in shapes.all()
        ],
    )

@router.post("/render", response_model=RenderedModuleResponse)
def render_entity(req: EntityDefinitionRequest):
    shapes = _derive(req)
    return RenderedModuleResponse(
        entity=shapes.entity_name,
        module=to_snake_case(shapes.entity_name),
        source=render_entity_models(shapes),
    )
