from __future__ import annotations

import json
from typing import List

QUOTES = ('"', "'")


def _strip_quotes(entry: str) -> str:
    entry = entry.strip()
    if len(entry) >= 2 and entry[0] == entry[-1] and entry[0] in QUOTES:
        return entry[1:-1]
    return entry


def parse_names(text: str) -> List[str]:
    """Parse a list of dotted names.

    Accepts a JSON array of strings, or names separated by newlines and/or
    commas with optional surrounding quotes, so the call-style list
    `"DATABASE.HOST", "HAT",` can be pasted as-is. Order is preserved;
    blank entries are dropped.
    """
    if text is None:
        return []
    text = text.strip()
    if not text:
        return []

    if text.startswith('['):
        data = json.loads(text)
        if not isinstance(data, list) or not all(isinstance(x, str) for x in data):
            raise ValueError("Expected a JSON array of strings.")
        return [x for x in data if x.strip()]

    names: List[str] = []
    for line in text.splitlines():
        for entry in line.split(','):
            name = _strip_quotes(entry)
            if name:
                names.append(name)
    return names


def read_names_content(file_obj) -> List[str]:
    """Read dotted names from an uploaded file or file path."""
    if file_obj is None:
        raise ValueError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        content = file_obj.read()
        if isinstance(content, bytes):
            content = content.decode('utf-8')
        return parse_names(content)

    path = file_obj.name if hasattr(file_obj, 'name') else file_obj
    with open(path, 'r', encoding='utf-8') as f:
        return parse_names(f.read())
