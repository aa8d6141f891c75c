from __future__ import annotations

from typing import Any

import numpy as np

from .core.entities import ConstantEntity
from .core.registry import AbstractMathRegistry


# name -> (value, description)
_BUILTIN_CONSTANTS: dict[str, tuple[float, str]] = {
    "pi": (np.pi, "Ratio of a circle's circumference to its diameter"),
    "e": (np.e, "Base of the natural logarithm"),
    "inf": (np.inf, "Positive infinity"),
    "nan": (np.nan, "Not a number"),
    "gamma": (np.euler_gamma, "Euler-Mascheroni constant"),
}


class ConstantsRegistry(AbstractMathRegistry[ConstantEntity]):
    """Named numeric constants. Built-ins are system entities and cannot be removed."""

    def on_init(self) -> None:
        for name, (value, description) in _BUILTIN_CONSTANTS.items():
            self.add(ConstantEntity(name=name, value=value, description=description, is_system=True))

    def define(self, name: str, value: Any, description: str = "") -> ConstantEntity:
        """Create or update a user constant and return the resident entity."""
        return self.add_or_update(ConstantEntity(name=name, value=value, description=description))

    def value_of(self, name: str) -> float | None:
        constant = self.get(name)
        if constant is None:
            return None
        return constant.value
