from __future__ import annotations

from typing import Any


def entity_sort_key(entity: Any) -> tuple[int, str]:
    """Shorter names first, then ordinal order on equal length."""
    name = entity.name
    return len(name), name


def compare_entities(left: Any, right: Any) -> int:
    lk = entity_sort_key(left)
    rk = entity_sort_key(right)
    if lk < rk:
        return -1
    if lk > rk:
        return 1
    return 0
