"""JSON Schema export for the demo export document.

Lets other tools (or a non-Python UI) validate files written by
DemoSessionStore.export_demo_data() before importing them.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from dealease_demo.schemas.session import DemoExport

SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
SCHEMA_ID = "https://dealease.app/schemas/demo-export.schema.json"


def export_demo_export_schema(
    output_path: Path | str | None = None,
) -> dict[str, Any]:
    """Export the DemoExport JSON Schema.

    Args:
        output_path: Optional path to write schema file. If provided,
            creates parent directories as needed.

    Returns:
        Dictionary containing the JSON Schema.

    Example:
        >>> schema = export_demo_export_schema()
        >>> schema["$schema"]
        'https://json-schema.org/draft/2020-12/schema'
    """
    # Wire format uses camelCase aliases
    schema = DemoExport.model_json_schema(by_alias=True)

    schema["$schema"] = SCHEMA_DIALECT
    schema["$id"] = SCHEMA_ID

    if "additionalProperties" not in schema:
        schema["additionalProperties"] = False

    if output_path is not None:
        _write_schema_file(schema, output_path)

    return schema


def _write_schema_file(schema: dict[str, Any], path: Path | str) -> None:
    """Write schema to JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.
    """
    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(schema, indent=2), encoding="utf-8")
