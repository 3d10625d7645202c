#!/usr/bin/env python3
"""Write the JSON schema for service catalog YAML files.

Editors that understand ``# yaml-language-server: $schema=...`` can use the
generated file to validate custom catalogs passed to ``ghbadges --catalog``.
The built-in catalog is loaded first so a broken ``services.yaml`` fails here
rather than at runtime.
"""

import json
import sys
from pathlib import Path

# Add src to path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from ghbadges.catalog import get_builtin_catalog_path, load_service_catalog
from ghbadges.models import ServiceCatalogFile
from ghbadges.template_engine import PLACEHOLDERS


def main() -> None:
    """Check the built-in catalog and save the catalog schema."""
    services = load_service_catalog()

    schema = ServiceCatalogFile.model_json_schema()
    schema["$schema"] = "http://json-schema.org/draft-07/schema#"
    schema["title"] = "ghbadges service catalog"
    schema["description"] = (
        "Badge services offered by ghbadges. URL templates may use the placeholders "
        + ", ".join(PLACEHOLDERS)
        + "."
    )

    output_path = Path(__file__).parent.parent / "schemas" / "catalog.schema.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w") as f:
        json.dump(schema, f, indent=2)

    print(f"Checked {len(services)} services in {get_builtin_catalog_path()}")
    print(f"Schema generated: {output_path}")


if __name__ == "__main__":
    main()
