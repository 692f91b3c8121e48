from __future__ import annotations

from typing import Iterable, List

SEPARATOR = '.'


def split_path(path: str) -> List[str]:
    """Split a dotted name into its segments.

    - '.' is the only separator; there is no escaping.
    - Empty segments are dropped, so '', None and '...' all yield [].
    - Segment text is returned as written (no case or character changes).
    """
    if path is None:
        return []
    if not isinstance(path, str):
        path = str(path)
    return [p for p in path.split(SEPARATOR) if p != '']


def join_path(segments: Iterable[str]) -> str:
    return SEPARATOR.join(segments)
