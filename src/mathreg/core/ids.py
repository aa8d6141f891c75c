from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

from .settings import RegistrySettings, load_settings


@runtime_checkable
class IdAllocator(Protocol):
    def next_id(self) -> int: ...


class CounterIdAllocator:
    """Monotonic integer source guarded by its own lock.

    One instance may be shared by any number of registries; no two callers ever
    observe the same id.
    """

    def __init__(self, start: int = 0) -> None:
        if int(start) < 0:
            raise ValueError("start must be >= 0")
        self._lock = threading.Lock()
        self._next = int(start)

    def next_id(self) -> int:
        with self._lock:
            result = self._next
            self._next += 1
            return result

    def peek(self) -> int:
        with self._lock:
            return self._next

def allocator_from_settings(settings: RegistrySettings | None = None) -> CounterIdAllocator:
    if settings is None:
        settings = load_settings()
    return CounterIdAllocator(settings.id_start)


_default_lock = threading.Lock()
_default_allocator: CounterIdAllocator | None = None


def get_default_allocator() -> CounterIdAllocator:
    """Process-wide allocator for registries built without one.

    Created on first use, so `MATHREG_ID_START` is read then and not at import.
    """
    global _default_allocator
    if _default_allocator is not None:
        return _default_allocator
    with _default_lock:
        if _default_allocator is None:
            _default_allocator = allocator_from_settings()
        return _default_allocator
