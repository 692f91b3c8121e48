from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from .paths import split_path

logger = logging.getLogger(__name__)

SELF_KEY = '__self__'


@dataclass
class Node:
    """One segment at one depth of the namespace tree.

    `children` is keyed by the raw segment text. `bound_key` is the full
    dotted name that ends at this node, if any. A node can carry both.
    """

    children: Dict[str, "Node"] = field(default_factory=dict)
    bound_key: Optional[str] = None


def is_leaf(node: Node) -> bool:
    """A node is a leaf only when it is bound and has no children; otherwise nested wins."""
    return node.bound_key is not None and not node.children


def insert_path(node: Node, parts: List[str], full_key: str) -> None:
    if not parts:
        return

    current = node
    for part in parts:
        current = current.children.setdefault(part, Node())

    if current.bound_key is not None and current.bound_key != full_key:
        logger.debug("Binding %r replaced by %r", current.bound_key, full_key)
    current.bound_key = full_key


def build_tree(names: Iterable[str]) -> Node:
    """Merge dotted names into one tree, in input order.

    Empty names are skipped. When two names split into the same segments the
    later one keeps the binding.
    """
    root = Node()
    for name in names:
        parts = split_path(name)
        if not parts:
            logger.debug("Skipping empty name %r", name)
            continue
        insert_path(root, parts, name)
    return root


def tree_to_dict(node: Node) -> Dict[str, Any]:
    """Nested-dict view of the tree for display.

    Leaf nodes are strings (the full key).
    Branch nodes are dictionaries.
    If a branch also carries a binding (e.g. 'A' and 'A.B'), that binding is
    shown under '__self__'; it does not appear in the generated schema.
    """
    out: Dict[str, Any] = {}
    for segment, child in node.children.items():
        if is_leaf(child):
            out[segment] = child.bound_key
            continue
        branch = tree_to_dict(child)
        if child.bound_key is not None:
            branch = {SELF_KEY: child.bound_key, **branch}
        out[segment] = branch
    return out
