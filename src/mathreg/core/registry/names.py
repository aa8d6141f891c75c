from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


@dataclass
class NameCache:
    """Ordered entity names, recomputed on first read after invalidation."""

    valid: bool = False
    names: tuple[str, ...] = ()

    def invalidate(self) -> None:
        self.valid = False
        self.names = ()

    def get_or_compute(self, compute: Callable[[], Iterable[str]]) -> tuple[str, ...]:
        if not self.valid:
            self.names = tuple(compute())
            self.valid = True
        return self.names
