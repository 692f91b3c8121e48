"""Core logic for env_vars_struct.

The Gradio UI lives in `app.py`. This package turns a flat list of dotted
names (e.g. "DATABASE.HOST") into nested, immutable configuration classes:
- split dotted names and merge them into a namespace tree
- derive field names and record type names from each segment
- build an ordered schema of records
- materialize that schema as dataclasses, or render it as Python source
"""
from __future__ import annotations

from .errors import EnvVarsError, MissingValueError, NameCollisionError
from .naming import ROOT_TYPE_NAME
from .runtime import build_config_class, env_vars_struct, materialize
from .schema import build_schema, build_schema_from_names

__all__ = [
    "ROOT_TYPE_NAME",
    "EnvVarsError",
    "MissingValueError",
    "NameCollisionError",
    "build_config_class",
    "build_schema",
    "build_schema_from_names",
    "env_vars_struct",
    "materialize",
]
