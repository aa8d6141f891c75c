from __future__ import annotations


class MathRegistryError(Exception):
    """Base class for registry errors."""


class DuplicateSystemEntity(MathRegistryError, ValueError):
    """Raised when a second system entity with an already-registered name is added."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Trying to add two system entities with same name: {name!r}")
        self.name = name
