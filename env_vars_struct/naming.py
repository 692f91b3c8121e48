"""Identifier derivation for segments.

Every segment yields two names, used wherever that segment appears:
- a field identifier: lower-cased, '-' replaced by '_'
- a type name fragment: UpperCamelCase of the '_'/'-' delimited words

Record type names are the parent's type name followed by the fragment,
starting from ROOT_TYPE_NAME, so "CACHE.REDIS.URL" lives in VarsCacheRedis.
Nothing here validates that the result is a legal Python identifier.
"""
from __future__ import annotations

from typing import List

ROOT_TYPE_NAME = "Vars"


def field_identifier(segment: str) -> str:
    return segment.lower().replace('-', '_')


def type_name_fragment(segment: str) -> str:
    words: List[str] = segment.replace('-', '_').split('_')
    return ''.join(word[:1].upper() + word[1:].lower() for word in words if word)


def qualified_type_name(parent_type_name: str, segment: str) -> str:
    return f"{parent_type_name}{type_name_fragment(segment)}"
