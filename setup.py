from __future__ import annotations

import re
from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Keep the version in one place: `src/mathreg/_version.py`."""

    text = (ROOT / "src" / "mathreg" / "_version.py").read_text(encoding="utf-8")
    match = re.search(r"^__version__ = [\"']([^\"']+)[\"']", text, re.M)
    if match is None:
        raise RuntimeError("Unable to find __version__ in src/mathreg/_version.py")
    return match.group(1)


setup(
    name="mathreg",
    version=_read_version(),
    description="Thread-safe registry of named math entities",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
