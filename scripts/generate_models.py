#!/usr/bin/env python3
"""
Script to generate Pydantic model modules from entity definitions.
Usage: python scripts/generate_models.py [DEFINITIONS_PATH] [OUT_DIR]
"""
import sys
from pathlib import Path
from fintrack.core.config import settings
from fintrack.core.logging import configure_logging
from fintrack.generators.entity_gen.errors import EntityDerivationError
from fintrack.generators.entity_gen.generator import generate_models


def main() -> int:
    definitions_path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(settings.entities_dir)
    out_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else Path(settings.output_dir)

    configure_logging()
    print(f"Definitions: {definitions_path}")
    print(f"Output:      {out_dir}")

    try:
        files = generate_models(definitions_path, out_dir)
    except EntityDerivationError as e:
        print(f"ERROR: {e.diagnostic()}")
        return 1

    print(f"\nGenerated {len(files)} file(s):")
    for file in files:
        print(f"  {out_dir / file.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
