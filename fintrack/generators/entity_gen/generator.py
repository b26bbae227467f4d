"""Orchestrator for entity model generation."""
import logging
from pathlib import Path
from typing import Dict, List
from fintrack.core.workflow import DerivationStage
from fintrack.generators.entity_gen.derive import derive_shapes
from fintrack.generators.entity_gen.errors import EntityDerivationError, InvalidEntityDefinition
from fintrack.generators.entity_gen.loader import load_definitions
from fintrack.generators.entity_gen.ingest import ingest_entity
from fintrack.generators.entity_gen.render import render_entity_models, render_package_init
from fintrack.generators.entity_gen.types import GeneratedFile
from fintrack.generators.entity_gen.utils import to_snake_case
from fintrack.generators.entity_gen.writer import write_files

log = logging.getLogger(__name__)


def generate_models(definitions_path: Path, out_dir: Path) -> List[GeneratedFile]:
    """
    Generate model modules for every entity definition.
    
    Args:
        definitions_path: Definition file or directory of definition files
        out_dir: Output directory for generated files
        
    Returns:
        List of GeneratedFile objects

    Raises:
        EntityDerivationError: for the first malformed entity; no files are written
    """
    files = []
    exports: Dict[str, List[str]] = {}

    for raw in load_definitions(Path(definitions_path)):
        entity_name = raw.get("name", "-") if isinstance(raw, dict) else "-"
        try:
            entity = ingest_entity(raw)
            shapes = derive_shapes(entity)
        except EntityDerivationError as e:
            log.error("Derivation failed: %s", e.diagnostic(),
                      extra={"entity": entity_name, "stage": DerivationStage.INGEST.value})
            raise

        module = to_snake_case(entity.name)
        if module in exports:
            raise InvalidEntityDefinition(entity.name, "Entity is defined more than once")
        files.append(GeneratedFile(
            path=f"{module}.py",
            content=render_entity_models(shapes),
        ))
        exports[module] = list(shapes.enums) + [shape.name for shape in shapes.all()]
        log.info("Rendered %s.py", module,
                 extra={"entity": entity.name, "stage": DerivationStage.RENDER.value})

    files.append(GeneratedFile(path="__init__.py", content=render_package_init(exports)))

    write_files(files, Path(out_dir))

    return files
