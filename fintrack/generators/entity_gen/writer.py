"""File writer for generated entity models."""
import logging
from pathlib import Path
from typing import List
from fintrack.core.workflow import DerivationStage
from fintrack.generators.entity_gen.types import GeneratedFile

log = logging.getLogger(__name__)


def write_files(files: List[GeneratedFile], out_dir: Path) -> None:
    """
    Write generated files to the output directory.
    
    Args:
        files: List of GeneratedFile objects to write
        out_dir: Base output directory path
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    
    for file in files:
        file_path = out_dir / file.path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(file.content, encoding="utf-8")
    log.info("Wrote %d file(s) to %s", len(files), out_dir, extra={"stage": DerivationStage.WRITE.value})
