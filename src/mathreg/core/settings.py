from __future__ import annotations

import os
from dataclasses import dataclass


ID_START_ENV = "MATHREG_ID_START"


@dataclass(frozen=True)
class RegistrySettings:
    """Process-level registry configuration.

    Notes:
    - Values are read from the environment once, when the settings are loaded.
    - `id_start` only affects the default allocator shared by registries that
      were not given an explicit one.
    """

    id_start: int = 0


def _int_from_env(var: str, default: int) -> int:
    raw = os.getenv(var, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None
    if value < 0:
        raise ValueError(f"{var} must be >= 0, got {value}")
    return value


def load_settings() -> RegistrySettings:
    return RegistrySettings(id_start=_int_from_env(ID_START_ENV, 0))
