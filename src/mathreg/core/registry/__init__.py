from __future__ import annotations

from .names import NameCache
from .service import AbstractMathRegistry, MathRegistry

__all__ = ["AbstractMathRegistry", "MathRegistry", "NameCache"]
