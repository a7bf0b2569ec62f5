"""molcodec core: data model and tabular views.

This package is intentionally standalone and must not import CLI/codecs
to avoid circular dependencies.
"""

from __future__ import annotations

from .model import DEFAULT_FORMULA, DEFAULT_NAME, Atom, Bond, Molecule
from .tables import TABLE_COLUMN_ORDER, TABLE_SCHEMAS, atoms_frame, bonds_frame

__all__ = [
    "Atom",
    "Bond",
    "Molecule",
    "DEFAULT_FORMULA",
    "DEFAULT_NAME",
    "TABLE_SCHEMAS",
    "TABLE_COLUMN_ORDER",
    "atoms_frame",
    "bonds_frame",
]
