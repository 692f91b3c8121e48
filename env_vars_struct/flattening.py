from __future__ import annotations

import dataclasses
from typing import Any, Dict, List

from .schema import Schema, leaf_paths


def flatten_config(config: Any, prefix: str = '') -> Dict[str, str]:
    """Flatten a constructed config into {attribute path: value}, in field order."""
    out: Dict[str, str] = {}
    for f in dataclasses.fields(config):
        path = f"{prefix}.{f.name}" if prefix else f.name
        value = getattr(config, f.name)
        if dataclasses.is_dataclass(value):
            out.update(flatten_config(value, path))
        else:
            out[path] = value
    return out


def schema_rows(schema: Schema) -> List[List[str]]:
    """Rows of [source key, attribute path, record type] for table display."""
    return [[key, path, type_name] for key, path, type_name in leaf_paths(schema)]


def config_rows(config: Any, schema: Schema, mask: bool = False) -> List[List[str]]:
    """Rows of [source key, attribute path, value]; `mask` hides values."""
    values = flatten_config(config)
    rows: List[List[str]] = []
    for key, path, _ in leaf_paths(schema):
        value = values.get(path, '')
        if mask and value:
            value = '*' * min(len(value), 8)
        rows.append([key, path, value])
    return rows
