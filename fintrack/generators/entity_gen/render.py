"""Render derived shapes as a Python module of Pydantic models."""
import json
from typing import Dict, List, Set, Tuple
from fintrack.generators.entity_gen.types import DerivedShape, DerivedShapes, ShapeField

DATETIME_TYPES = ("date", "datetime")


def _used_bases(shapes: DerivedShapes) -> Set[str]:
    return {f.type.base for shape in shapes.all() for f in shape.fields}


def _render_imports(shapes: DerivedShapes) -> List[str]:
    bases = _used_bases(shapes)
    lines = []
    datetime_names = [name for name in DATETIME_TYPES if name in bases]
    if datetime_names:
        lines.append(f"from datetime import {', '.join(datetime_names)}")
    if "Decimal" in bases:
        lines.append("from decimal import Decimal")
    if shapes.enums:
        lines.append("from enum import Enum")
    lines.append("from typing import ClassVar, Optional")
    lines.append("")
    lines.append("from pydantic import BaseModel")
    return lines


def _render_enum(name: str, members: Tuple[str, ...]) -> List[str]:
    lines = [f"class {name}(str, Enum):"]
    for member in members:
        lines.append(f'    {member} = "{member}"')
    return lines


def _render_field(field: ShapeField) -> str:
    if field.type.optional:
        return f"    {field.name}: {field.type.annotation()} = None"
    return f"    {field.name}: {field.type.annotation()}"


def render_shape(shape: DerivedShape) -> str:
    """Render one derived shape as a Pydantic model class."""
    lines = [f"class {shape.name}(BaseModel):"]
    if shape.storage_location is not None:
        lines.append(f"    __tablename__: ClassVar[str] = {json.dumps(shape.storage_location)}")
        if shape.fields:
            lines.append("")
    for field in shape.fields:
        lines.append(_render_field(field))
    if len(lines) == 1:
        lines.append("    pass")
    return "\n".join(lines)


def render_entity_models(shapes: DerivedShapes) -> str:
    """Generate a module holding the enums and five models for an entity."""
    lines = [f'"""Models derived from the {shapes.entity_name} entity."""']
    lines.extend(_render_imports(shapes))

    for name, members in shapes.enums.items():
        lines.append("")
        lines.append("")
        lines.extend(_render_enum(name, members))

    for shape in shapes.all():
        lines.append("")
        lines.append("")
        lines.append(render_shape(shape))

    return "\n".join(lines) + "\n"


def render_package_init(modules: Dict[str, List[str]]) -> str:
    """Generate an __init__.py re-exporting every model, keyed by module name."""
    lines = ['"""Generated entity models."""']
    exported = []
    for module, names in modules.items():
        lines.append(f"from .{module} import {', '.join(names)}")
        exported.extend(names)
    lines.append("")
    lines.append("__all__ = [")
    for name in exported:
        lines.append(f'    "{name}",')
    lines.append("]")
    return "\n".join(lines) + "\n"
