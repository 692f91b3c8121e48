from __future__ import annotations

import logging
import os
from typing import Callable, Mapping, Optional

from .errors import MissingValueError

logger = logging.getLogger(__name__)

Lookup = Callable[[str], Optional[str]]


def environ_lookup(key: str) -> Optional[str]:
    return os.environ.get(key)


def mapping_lookup(mapping: Mapping[str, str]) -> Lookup:
    """Lookup over a fixed mapping (tests, UI tables)."""
    def lookup(key: str) -> Optional[str]:
        return mapping.get(key)
    return lookup


def require_value(lookup: Lookup, key: str) -> str:
    value = lookup(key)
    if value is None:
        logger.error("No value for %s", key)
        raise MissingValueError(key)
    logger.debug("Resolved %s", key)
    return value


def require_env(key: str) -> str:
    """Entry point used by generated modules."""
    return require_value(environ_lookup, key)
