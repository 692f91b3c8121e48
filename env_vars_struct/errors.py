from __future__ import annotations


class EnvVarsError(Exception):
    """Base class for errors raised while building or populating a config."""


class MissingValueError(EnvVarsError, LookupError):
    """A leaf's source lookup found no value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Environment variable {key} not found")

    def __str__(self) -> str:
        return self.args[0]


class NameCollisionError(EnvVarsError, ValueError):
    """Two names normalize to the same field or record type."""
