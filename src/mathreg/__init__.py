from __future__ import annotations

from ._version import __version__
from .constants import ConstantsRegistry
from .core.entities import ConstantEntity, Entity, MathEntity
from .core.errors import DuplicateSystemEntity, MathRegistryError
from .core.ids import CounterIdAllocator, IdAllocator, allocator_from_settings, get_default_allocator
from .core.ordering import compare_entities, entity_sort_key
from .core.registry import AbstractMathRegistry, MathRegistry
from .core.settings import RegistrySettings, load_settings

__all__ = [
    "__version__",
    "MathEntity",
    "Entity",
    "ConstantEntity",
    "MathRegistry",
    "AbstractMathRegistry",
    "ConstantsRegistry",
    "IdAllocator",
    "CounterIdAllocator",
    "get_default_allocator",
    "allocator_from_settings",
    "DuplicateSystemEntity",
    "MathRegistryError",
    "entity_sort_key",
    "compare_entities",
    "RegistrySettings",
    "load_settings",
]
