from __future__ import annotations

from .entities import ConstantEntity, Entity, MathEntity
from .errors import DuplicateSystemEntity, MathRegistryError
from .ids import CounterIdAllocator, IdAllocator, allocator_from_settings, get_default_allocator
from .ordering import compare_entities, entity_sort_key
from .registry import AbstractMathRegistry, MathRegistry, NameCache
from .settings import ID_START_ENV, RegistrySettings, load_settings

__all__ = [
    "MathEntity",
    "Entity",
    "ConstantEntity",
    "MathRegistryError",
    "DuplicateSystemEntity",
    "IdAllocator",
    "CounterIdAllocator",
    "get_default_allocator",
    "allocator_from_settings",
    "entity_sort_key",
    "compare_entities",
    "MathRegistry",
    "AbstractMathRegistry",
    "NameCache",
    "RegistrySettings",
    "load_settings",
    "ID_START_ENV",
]
