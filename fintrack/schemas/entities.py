from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List


class EntityDefinitionRequest(BaseModel):
    name: str = Field(..., examples=["Entry"])
    table_name: Optional[str] = Field(None, examples=["entries"])
    fields: List[Any] = []
    enums: Dict[str, List[str]] = {}


class ShapeFieldResponse(BaseModel):
    name: str
    type: str


class ShapeResponse(BaseModel):
    name: str
    storage_location: Optional[str] = None
    fields: List[ShapeFieldResponse]


class DerivedShapesResponse(BaseModel):
    entity: str
    shapes: List[ShapeResponse]


class RenderedModuleResponse(BaseModel):
    entity: str
    module: str
    source: str


class DerivationErrorDetail(BaseModel):
    entity: str
    field: Optional[str] = None
    message: str
