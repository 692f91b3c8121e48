from __future__ import annotations

import logging
import os
from typing import Iterable, List

from .naming import ROOT_TYPE_NAME
from .schema import LeafField, RecordSchema, Schema, build_schema_from_names

logger = logging.getLogger(__name__)

HEADER = "# Generated by env_vars_struct. Do not edit."
DEFAULT_LOOKUP_IMPORT = "env_vars_struct.sources"


def render_record(rec: RecordSchema) -> List[str]:
    lines = ["@dataclass(frozen=True)", f"class {rec.type_name}:"]
    if not rec.fields:
        lines.append("    pass")
        return lines

    for f in rec.fields:
        if isinstance(f, LeafField):
            lines.append(f"    {f.name}: str = Field(default_factory=lambda: require_env({f.source_key!r}))")
        else:
            lines.append(f"    {f.name}: {f.type_name} = Field(default_factory={f.type_name})")
    return lines


def render_module(schema: Schema, lookup_import: str = DEFAULT_LOOKUP_IMPORT) -> str:
    """Render the schema as a Python module.

    Classes appear in schema order (children first), so every default
    factory refers to a class defined above it. `lookup_import` names the
    module that provides `require_env`.
    """
    lines = [
        HEADER,
        "from __future__ import annotations",
        "",
        # Field identifiers are always lower case, so a field named "field" cannot
        # shadow the capitalised alias inside a class body.
        "from dataclasses import dataclass, field as Field",
        "",
        f"from {lookup_import} import require_env",
    ]
    for rec in schema.records:
        lines.extend(["", ""])
        lines.extend(render_record(rec))

    lines.extend(["", "", f"__all__ = [{schema.root_name!r}]"])
    return "\n".join(lines) + "\n"


def render_names(names: Iterable[str], root_name: str = ROOT_TYPE_NAME) -> str:
    return render_module(build_schema_from_names(names, root_name))


def write_module(schema: Schema, path: str, lookup_import: str = DEFAULT_LOOKUP_IMPORT) -> str:
    source = render_module(schema, lookup_import)
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(source)
    logger.info("Wrote %s (%d records) to %s", schema.root_name, len(schema.records), path)
    return path
