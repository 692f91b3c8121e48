from __future__ import annotations

from typing import Any

from .naming import field_identifier
from .paths import split_path


def get_value_by_path(config: Any, path: str) -> Any:
    """Retrieve a value from a constructed config using its dotted name.

    Each segment is normalized the same way field names are, so
    "CACHE.REDIS-URL" reads config.cache.redis_url. Returns None when the
    path does not resolve.
    """
    keys = split_path(path)
    if not keys:
        return None

    val = config
    for key in keys:
        name = field_identifier(key)
        if not hasattr(val, '__dataclass_fields__') or name not in val.__dataclass_fields__:
            return None
        val = getattr(val, name)
    return val
