"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import molcodec` to fail.

We ensure `src/` is on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared Test Helpers
# =============================================================================


def make_water(*, name: str = "", formula: str = ""):
    """Water with both bonds linked to their atoms (ids populated too)."""
    from molcodec.core.model import Atom, Bond, Molecule

    h1 = Atom(id=1, symbol="H", atomic_number=1)
    h2 = Atom(id=2, symbol="H", atomic_number=1)
    o = Atom(id=3, symbol="O", atomic_number=8)
    return Molecule(
        atoms=[h1, h2, o],
        bonds=[Bond.between(h1, o, "single"), Bond.between(h2, o, "single")],
        name=name,
        formula=formula,
    )
