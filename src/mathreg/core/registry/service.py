from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from bisect import insort
from typing import Generic, Iterator, Protocol, TypeVar

from ..entities import MathEntity
from ..errors import DuplicateSystemEntity
from ..ids import IdAllocator, get_default_allocator
from ..ordering import entity_sort_key
from .names import NameCache

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=MathEntity)


class MathRegistry(Protocol[T]):
    def init(self) -> None: ...

    def add(self, entity: T) -> None: ...

    def add_or_update(self, entity: T) -> T: ...

    def remove(self, entity: T) -> None: ...

    def get_names(self) -> tuple[str, ...]: ...

    def get(self, name: str) -> T | None: ...

    def get_by_id(self, entity_id: int) -> T | None: ...

    def contains(self, name: str) -> bool: ...

    def get_entities(self) -> tuple[T, ...]: ...

    def get_system_entities(self) -> tuple[T, ...]: ...


class AbstractMathRegistry(ABC, Generic[T]):
    """Thread-safe container of named entities.

    Notes:
    - `_entities` holds every entry, `_system_entities` the protected subset.
      Both are kept sorted by `entity_sort_key`.
    - One re-entrant lock guards both lists and the name cache, so `on_init`
      may call `add` while `init` holds it.
    - Ids come from `id_allocator`, shared process-wide unless one is passed in.
    - Inserting writes a fresh id onto the entity. An entity belongs to one
      registry; handing the same object to a second one re-ids it.
    """

    def __init__(self, *, id_allocator: IdAllocator | None = None) -> None:
        self._lock = threading.RLock()
        self._ids = id_allocator if id_allocator is not None else get_default_allocator()
        self._entities: list[T] = []
        self._system_entities: list[T] = []
        self._names = NameCache()
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def init(self) -> None:
        """Run `on_init` exactly once. A failing hook leaves the registry uninitialized."""
        if self._initialized:
            return
        with self._lock:
            if self._initialized:
                return
            try:
                self.on_init()
            except Exception:
                logger.exception("%s: on_init failed", type(self).__name__)
                raise
            self._initialized = True
            logger.debug("%s: initialized with %d entities", type(self).__name__, len(self._entities))

    @abstractmethod
    def on_init(self) -> None:
        """Populate initial entities, usually through `add`."""

    # Internal helpers. Callers must hold `_lock`.

    @staticmethod
    def _find_by_name_locked(name: str, entities: list[T]) -> T | None:
        for entity in entities:
            if entity.name == name:
                return entity
        return None

    def _insert_locked(self, entity: T) -> None:
        entity.id = self._ids.next_id()
        insort(self._entities, entity, key=entity_sort_key)
        self._names.invalidate()
        logger.debug("%s: added %r with id %d", type(self).__name__, entity.name, entity.id)

    def _compute_names_locked(self) -> list[str]:
        return [e.name for e in self._entities if e.name]

    # Public operations.

    def add(self, entity: T) -> None:
        with self._lock:
            if entity.is_system:
                if self._find_by_name_locked(entity.name, self._system_entities) is not None:
                    raise DuplicateSystemEntity(entity.name)
                insort(self._system_entities, entity, key=entity_sort_key)

            if self._find_by_name_locked(entity.name, self._entities) is None:
                self._insert_locked(entity)

    def add_or_update(self, entity: T) -> T:
        """Insert `entity`, or copy its fields onto the resident entry.

        The resident is looked up by id when `entity` already carries one, by
        name otherwise. Callers must use the returned object: after an update
        the argument is only a field donor.

        The insert path does not check for a duplicate system name, unlike `add`.
        An update by id may rename the resident to a name another entry already
        holds; both entries are then kept under that name.
        """
        with self._lock:
            if entity.id is not None:
                existing = self.get_by_id(entity.id)
            else:
                existing = self.get(entity.name)

            if existing is None:
                self._insert_locked(entity)
                if entity.is_system:
                    insort(self._system_entities, entity, key=entity_sort_key)
                return entity

            existing.copy_from(entity)
            self._entities.sort(key=entity_sort_key)
            self._system_entities.sort(key=entity_sort_key)
            self._names.invalidate()
            logger.debug("%s: updated %r (id %d)", type(self).__name__, existing.name, existing.id)
            return existing

    def remove(self, entity: T) -> None:
        """Remove a user entity by name. System entities and unknown names are ignored."""
        if entity.is_system:
            return
        with self._lock:
            for idx, resident in enumerate(self._entities):
                if resident.name == entity.name:
                    del self._entities[idx]
                    self._names.invalidate()
                    logger.debug("%s: removed %r", type(self).__name__, resident.name)
                    return

    def get_names(self) -> tuple[str, ...]:
        with self._lock:
            return self._names.get_or_compute(self._compute_names_locked)

    def get(self, name: str) -> T | None:
        with self._lock:
            return self._find_by_name_locked(name, self._entities)

    def get_by_id(self, entity_id: int) -> T | None:
        with self._lock:
            for entity in self._entities:
                if entity.id == entity_id:
                    return entity
            return None

    def contains(self, name: str) -> bool:
        return self.get(name) is not None

    def get_entities(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._entities)

    def get_system_entities(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._system_entities)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entities)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_entities())
