from __future__ import annotations

import dataclasses
import logging
from functools import partial
from typing import Dict, Iterable, List, Optional, Tuple

from .naming import ROOT_TYPE_NAME
from .schema import LeafField, Schema, build_schema_from_names
from .sources import Lookup, environ_lookup, require_value

logger = logging.getLogger(__name__)


def materialize(schema: Schema, lookup: Optional[Lookup] = None) -> Dict[str, type]:
    """Create one frozen dataclass per record, keyed by type name.

    Every field has a default factory: leaves call `lookup` with their
    full dotted key, nested fields construct the child record. Calling a
    class with no arguments therefore populates the whole subtree, in field
    order, or raises MissingValueError before returning anything.
    """
    if lookup is None:
        lookup = environ_lookup

    classes: Dict[str, type] = {}
    for rec in schema.records:
        field_specs: List[Tuple[str, type, dataclasses.Field]] = []
        for f in rec.fields:
            if isinstance(f, LeafField):
                spec = dataclasses.field(default_factory=partial(require_value, lookup, f.source_key))
                field_specs.append((f.name, str, spec))
            else:
                child_cls = classes[f.type_name]
                field_specs.append((f.name, child_cls, dataclasses.field(default_factory=child_cls)))
        classes[rec.type_name] = dataclasses.make_dataclass(rec.type_name, field_specs, frozen=True)

    logger.info("Materialized %d config classes for %s", len(classes), schema.root_name)
    return classes


def build_config_class(
    names: Iterable[str],
    lookup: Optional[Lookup] = None,
    root_name: str = ROOT_TYPE_NAME,
) -> type:
    """Return the root config class for `names`; instantiate it to read the values."""
    schema = build_schema_from_names(names, root_name)
    return materialize(schema, lookup)[schema.root_name]


def env_vars_struct(*names: str, lookup: Optional[Lookup] = None) -> type:
    """Shorthand for build_config_class(names).

    Vars = env_vars_struct("DATABASE.HOST", "DATABASE.PORT", "HAT")
    vars = Vars()
    vars.database.host
    """
    return build_config_class(names, lookup=lookup)
