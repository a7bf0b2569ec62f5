"""Tabular views of a molecule (pandas).

Atoms and bonds are exposed as DataFrames with a fixed column order and
pandas extension dtypes so that missing values (eg the symbol of an unresolved
bond endpoint) stay `<NA>` instead of turning columns into `object`.

The frames are read-only snapshots; editing them does not touch the molecule.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from molcodec.core.model import Molecule

if TYPE_CHECKING:  # pragma: no cover
    import pandas as pd


# ----------------------------
# Canonical schema descriptors
# ----------------------------

TABLE_SCHEMAS: dict[str, dict[str, str]] = {
    "atoms": {
        "id": "Int64",
        "symbol": "string",
        "atomic_number": "Int64",
        "charge": "Int64",
    },
    "bonds": {
        "atom1_id": "Int64",
        "atom2_id": "Int64",
        "bond_type": "string",
        "atom1_symbol": "string",
        "atom2_symbol": "string",
    },
}

TABLE_COLUMN_ORDER: dict[str, tuple[str, ...]] = {k: tuple(v.keys()) for k, v in TABLE_SCHEMAS.items()}

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _fits_int64(values: Any) -> bool:
    return all(v is None or _INT64_MIN <= v <= _INT64_MAX for v in values)


def _frame(table: str, rows: list[dict[str, Any]]) -> "pd.DataFrame":
    """Build a table with the schema dtypes.

    Integer columns holding a value outside the int64 range stay `object` so
    arbitrarily large Python ints survive unchanged.
    """
    import pandas as pd

    columns = list(TABLE_COLUMN_ORDER[table])
    dtypes = dict(TABLE_SCHEMAS[table])
    for col, dtype in TABLE_SCHEMAS[table].items():
        if dtype == "Int64" and not _fits_int64(row[col] for row in rows):
            dtypes[col] = "object"
    df = pd.DataFrame(rows, columns=columns, dtype=object)
    return df.astype(dtypes)


def atoms_frame(molecule: Molecule) -> "pd.DataFrame":
    """One row per atom, in atom sequence order."""
    rows = [
        {
            "id": atom.id,
            "symbol": atom.symbol,
            "atomic_number": atom.atomic_number,
            "charge": atom.charge,
        }
        for atom in molecule.atoms
    ]
    return _frame("atoms", rows)


def bonds_frame(molecule: Molecule) -> "pd.DataFrame":
    """One row per bond; endpoint symbols come from the resolved links."""
    rows = [
        {
            "atom1_id": bond.atom1_id,
            "atom2_id": bond.atom2_id,
            "bond_type": bond.bond_type,
            "atom1_symbol": bond.atom1.symbol if bond.atom1 is not None else None,
            "atom2_symbol": bond.atom2.symbol if bond.atom2 is not None else None,
        }
        for bond in molecule.bonds
    ]
    return _frame("bonds", rows)


__all__ = [
    "TABLE_COLUMN_ORDER",
    "TABLE_SCHEMAS",
    "atoms_frame",
    "bonds_frame",
]
