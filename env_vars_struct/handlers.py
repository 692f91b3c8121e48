from __future__ import annotations

import logging
import os
import tempfile
from typing import Dict, List

import gradio as gr

from .codegen import render_module, write_module
from .errors import EnvVarsError
from .flattening import config_rows, schema_rows
from .io_utils import parse_names, read_names_content
from .runtime import materialize
from .schema import build_schema, leaf_paths
from .sources import environ_lookup, mapping_lookup
from .tree import build_tree, tree_to_dict

logger = logging.getLogger(__name__)

SOURCE_ENVIRONMENT = "Environment"
SOURCE_TABLE = "Values table"


def load_names_file(file_obj):
    if file_obj is None:
        return gr.update(), "No file uploaded."

    try:
        names = read_names_content(file_obj)
    except Exception as e:
        return gr.update(), f"Error reading names: {str(e)}"

    return "\n".join(names), f"Loaded {len(names)} names."


def build_preview(names_text: str):
    """Tree view, field mapping table, generated source and status for the names."""
    try:
        names = parse_names(names_text)
    except ValueError as e:
        return None, [], "", f"Error parsing names: {str(e)}"

    if not names:
        return None, [], "", "No names entered."

    tree = build_tree(names)
    try:
        schema = build_schema(tree)
    except EnvVarsError as e:
        return tree_to_dict(tree), [], "", f"Error: {str(e)}"

    rows = schema_rows(schema)
    return (
        tree_to_dict(tree),
        rows,
        render_module(schema),
        f"{len(rows)} fields in {len(schema.records)} records.",
    )


def values_table_template(names_text: str, values_df=None):
    """One [key, value] row per leaf key, keeping values already typed in."""
    try:
        schema = build_schema(build_tree(parse_names(names_text)))
    except (ValueError, EnvVarsError):
        return []

    current = table_to_mapping(values_df)
    return [[key, current.get(key, '')] for key, _, _ in leaf_paths(schema)]


def table_to_mapping(values_df) -> Dict[str, str]:
    if values_df is None:
        return {}

    rows: List[list]
    try:
        rows = values_df.values.tolist()
    except AttributeError:
        rows = list(values_df)

    mapping: Dict[str, str] = {}
    for row in rows:
        if len(row) < 2 or not row[0]:
            continue
        # Blank cells count as missing so the table behaves like an unset variable.
        if row[1] is None or str(row[1]) == '':
            continue
        mapping[str(row[0])] = str(row[1])
    return mapping


def resolve_config_handler(names_text: str, source: str, values_df=None, mask: bool = True):
    try:
        names = parse_names(names_text)
    except ValueError as e:
        return [], f"Error parsing names: {str(e)}"

    if not names:
        return [], "No names entered."

    if source == SOURCE_TABLE:
        lookup = mapping_lookup(table_to_mapping(values_df))
    else:
        lookup = environ_lookup

    try:
        schema = build_schema(build_tree(names))
        root_cls = materialize(schema, lookup)[schema.root_name]
        config = root_cls()
    except (EnvVarsError, TypeError) as e:
        # make_dataclass rejects keyword and non-identifier field names with TypeError.
        logger.debug("Resolve failed: %s", e)
        return [], f"Error: {str(e)}"

    rows = config_rows(config, schema, mask=bool(mask))
    return rows, f"Resolved {len(rows)} values from {source or SOURCE_ENVIRONMENT}."


def export_module_handler(names_text: str, file_name: str):
    try:
        schema = build_schema(build_tree(parse_names(names_text)))
    except (ValueError, EnvVarsError) as e:
        return None, f"Error: {str(e)}"

    if not schema.root.fields:
        return None, "No names entered."

    file_name = os.path.basename((file_name or "").strip())
    if not file_name:
        file_name = "env_vars"
    if not file_name.lower().endswith('.py'):
        file_name += '.py'

    path = os.path.join(tempfile.gettempdir(), file_name)
    try:
        write_module(schema, path)
    except OSError as e:
        logger.exception("Export failed")
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"
