from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class MathEntity(Protocol):
    """What a registry needs from the objects it holds.

    `id` is written by the registry when the entity is first inserted.
    `copy_from` transfers field values in place so that references to a
    resident entity stay valid after an update.
    """

    name: str
    id: int | None

    @property
    def is_system(self) -> bool: ...

    def copy_from(self, other: Any) -> None: ...


@dataclass(eq=False, kw_only=True)
class Entity:
    """Mutable named entity.

    Notes:
    - Equality is identity: two objects with the same fields are still two entries.
    - `id` is never copied by `copy_from`; it belongs to the resident object.
    - `id` is written by the registry on insert. Keep each entity in a single
      registry: inserting it elsewhere assigns a new id.
    """

    name: str
    description: str = ""
    is_system: bool = False
    id: int | None = None

    def __post_init__(self) -> None:
        self.name = self._normalize_name(self.name)

    @staticmethod
    def _normalize_name(name: Any) -> str:
        if not isinstance(name, str):
            raise ValueError(f"name must be a string, got {type(name).__name__}")
        if not name:
            raise ValueError("name cannot be empty")
        return name

    @property
    def is_id_defined(self) -> bool:
        return self.id is not None

    def copy_from(self, other: Entity) -> None:
        self.name = self._normalize_name(other.name)
        self.description = other.description
        self.is_system = bool(other.is_system)


def _normalize_real(value: Any, *, name: str = "value") -> float:
    arr = np.asarray(value)
    if arr.shape != ():
        raise ValueError(f"{name} must be a scalar, got shape {arr.shape}")
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise ValueError(f"{name} must be a real number, got {arr.dtype}")
    return float(arr.astype(np.float64))


@dataclass(eq=False, kw_only=True)
class ConstantEntity(Entity):
    value: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        self.value = _normalize_real(self.value)

    def copy_from(self, other: Entity) -> None:
        super().copy_from(other)
        if isinstance(other, ConstantEntity):
            self.value = other.value
