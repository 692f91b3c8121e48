from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Puts the repository root on sys.path so `env_vars_struct` imports without an
install, and provides the name lists and lookups shared by the test modules.
"""

import os
import sys
from typing import Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_ROOT_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if _ROOT_PATH not in sys.path:
    sys.path.insert(0, _ROOT_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_names() -> List[str]:
    """The names used in the package README example."""
    return [
        "DATABASE.HOST",
        "DATABASE.PORT",
        "API.KEY",
        "API.SECRET",
        "CACHE.REDIS.URL",
        "HAT",
    ]


@pytest.fixture
def sample_values() -> Dict[str, str]:
    return {
        "DATABASE.HOST": "host",
        "DATABASE.PORT": "5432",
        "API.KEY": "magic key",
        "API.SECRET": "magic secret",
        "CACHE.REDIS.URL": "redis://someplace",
        "HAT": "fedora",
    }


@pytest.fixture
def identity_lookup():
    """Lookup that answers every key with the key itself."""
    def lookup(key: str) -> str:
        return key
    return lookup
