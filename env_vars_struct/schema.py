from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple, Union

from .errors import NameCollisionError
from .naming import ROOT_TYPE_NAME, field_identifier, qualified_type_name
from .tree import Node, build_tree, is_leaf

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeafField:
    name: str
    source_key: str


@dataclass(frozen=True)
class NestedField:
    name: str
    type_name: str


Field = Union[LeafField, NestedField]


@dataclass(frozen=True)
class RecordSchema:
    type_name: str
    fields: Tuple[Field, ...]

    def field_names(self) -> List[str]:
        return [f.name for f in self.fields]


@dataclass(frozen=True)
class Schema:
    """All records of a configuration, children before parents, root last."""

    root_name: str
    records: Tuple[RecordSchema, ...]

    @property
    def root(self) -> RecordSchema:
        return self.records[-1]

    def record(self, type_name: str) -> RecordSchema:
        for rec in self.records:
            if rec.type_name == type_name:
                return rec
        raise KeyError(type_name)

    def type_names(self) -> List[str]:
        return [rec.type_name for rec in self.records]


def ordered_children(node: Node) -> List[Tuple[str, Node]]:
    """Children sorted by field identifier, then by raw segment."""
    return sorted(node.children.items(), key=lambda item: (field_identifier(item[0]), item[0]))


def _collect_records(node: Node, type_name: str, out: List[RecordSchema]) -> None:
    fields: List[Field] = []
    seen: Dict[str, str] = {}

    for segment, child in ordered_children(node):
        name = field_identifier(segment)
        if name in seen:
            raise NameCollisionError(
                f"Segments {seen[name]!r} and {segment!r} in {type_name} both map to field {name!r}"
            )
        seen[name] = segment

        if is_leaf(child):
            fields.append(LeafField(name=name, source_key=child.bound_key))
            continue

        if child.bound_key is not None:
            logger.debug("Dropping binding %r: %s.%s is a namespace", child.bound_key, type_name, name)
        child_type_name = qualified_type_name(type_name, segment)
        _collect_records(child, child_type_name, out)
        fields.append(NestedField(name=name, type_name=child_type_name))

    logger.debug("Record %s: %s", type_name, ", ".join(f.name for f in fields) or "(no fields)")
    out.append(RecordSchema(type_name=type_name, fields=tuple(fields)))


def build_schema(root: Node, root_name: str = ROOT_TYPE_NAME) -> Schema:
    records: List[RecordSchema] = []
    _collect_records(root, root_name, records)

    seen = set()
    for rec in records:
        if rec.type_name in seen:
            raise NameCollisionError(f"Record type {rec.type_name!r} is generated more than once")
        seen.add(rec.type_name)

    return Schema(root_name=root_name, records=tuple(records))


def build_schema_from_names(names: Iterable[str], root_name: str = ROOT_TYPE_NAME) -> Schema:
    return build_schema(build_tree(names), root_name)


def leaf_paths(schema: Schema) -> List[Tuple[str, str, str]]:
    """(source key, attribute path, record type) for every leaf, in field order."""
    rows: List[Tuple[str, str, str]] = []

    def walk(rec: RecordSchema, prefix: str) -> None:
        for f in rec.fields:
            path = f"{prefix}.{f.name}" if prefix else f.name
            if isinstance(f, LeafField):
                rows.append((f.source_key, path, rec.type_name))
            else:
                walk(schema.record(f.type_name), path)

    walk(schema.root, '')
    return rows
