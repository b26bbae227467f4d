"""Naming helpers for entity derivation."""
import re
from fintrack.generators.entity_gen.types import ShapeNames


def to_snake_case(name: str) -> str:
    """Convert PascalCase or camelCase to snake_case."""
    s1 = re.sub('(.)([A-Z][a-z]+)', r'\1_\2', name)
    s2 = re.sub('([a-z0-9])([A-Z])', r'\1_\2', s1)
    return s2.lower()


def shape_names(entity_name: str) -> ShapeNames:
    """Derive the five generated type names from the entity name."""
    return ShapeNames(
        create=f"New{entity_name}",
        create_request=f"Create{entity_name}Request",
        update=f"Update{entity_name}",
        update_request=f"Update{entity_name}Request",
        response=f"{entity_name}Response",
    )
