"""Load entity definition documents from JSON or YAML files."""
import json
import logging
from pathlib import Path
from typing import Any, Dict, List
import yaml
from fintrack.core.workflow import DerivationStage
from fintrack.generators.entity_gen.ingest import ingest_entity
from fintrack.generators.entity_gen.types import EntityDefinition

log = logging.getLogger(__name__)

DEFINITION_SUFFIXES = {".json", ".yaml", ".yml"}


def _read_document(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        if path.suffix == ".json":
            return json.load(f)
        return yaml.safe_load(f)


def load_definitions(path: Path) -> List[Dict[str, Any]]:
    """
    Read raw entity mappings from a definition file or a directory of them.

    A document holds either a single entity mapping or {"entities": [...]}.
    Directory entries are read in file-name order.
    """
    path = Path(path)
    if path.is_dir():
        files = sorted(p for p in path.iterdir() if p.suffix in DEFINITION_SUFFIXES)
    else:
        files = [path]

    definitions = []
    for file_path in files:
        document = _read_document(file_path)
        if isinstance(document, dict) and "entities" in document:
            entries = document["entities"] or []
        else:
            entries = [document]
        log.info(
            "Loaded %d definition(s) from %s", len(entries), file_path,
            extra={"stage": DerivationStage.LOAD.value},
        )
        definitions.extend(entries)
    return definitions


def load_entities(path: Path) -> List[EntityDefinition]:
    """Load and ingest every entity definition under path."""
    return [ingest_entity(raw) for raw in load_definitions(path)]
