"""Molecule JSON codec (encode + decode).

Wire format (text, `indent=2`, non-ASCII kept as-is, key order fixed, no trailing newline):
{
  "atoms": [{"id": 1, "symbol": "H", "atomic_number": 1, "charge": -1}, ...],
  "bonds": [{"atom1_id": 1, "atom2_id": 3, "bond_type": "single"}, ...],
  "name": "Water",
  "formula": "H2O"
}

Rules:
- `charge` is written only when non-zero and defaults to 0 when absent.
- Bonds are written by id only; the in-memory atom links are never serialized.
- Encode first rebuilds every bond's ids from its links (all-or-nothing).
- Decode rebuilds the links from the ids using a last-wins id lookup.
  Dangling ids leave a link unset unless `strict_refs=True`; duplicate atom ids
  are shadowed unless `strict_ids=True`.
- Missing `atoms`/`bonds` decode as empty, missing `name`/`formula` as "".
  Explicit nulls are rejected.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any

from molcodec.core.model import Atom, Bond, Molecule


@dataclass(frozen=True)
class MoleculeEncodeError(ValueError):
    """Deterministic error raised when a molecule cannot be encoded."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class MoleculeDecodeError(ValueError):
    """Deterministic error raised when text is not a valid molecule document."""

    message: str

    def __str__(self) -> str:
        return self.message


_MISSING = object()
_ROOT = "molecule.json"


def _require_dict(value: Any, *, where: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise MoleculeDecodeError(f"{where}: expected JSON object, got {type(value).__name__}")
    return value


def _require_list(value: Any, *, where: str) -> list[Any]:
    if not isinstance(value, list):
        raise MoleculeDecodeError(f"{where}: expected JSON array, got {type(value).__name__}")
    return value


def _require_key(obj: dict[str, Any], key: str, *, where: str) -> Any:
    v = obj.get(key, _MISSING)
    if v is _MISSING:
        raise MoleculeDecodeError(f"{where}: missing required key '{key}'")
    if v is None:
        raise MoleculeDecodeError(f"{where}.{key}: must not be null")
    return v


def _optional_key(obj: dict[str, Any], key: str, default: Any, *, where: str) -> Any:
    """Return value for key; `default` if key missing; error if explicitly null."""
    v = obj.get(key, _MISSING)
    if v is _MISSING:
        return default
    if v is None:
        raise MoleculeDecodeError(f"{where}.{key}: must not be null")
    return v


def _require_int(value: Any, *, where: str) -> int:
    # Python bool is a subclass of int; JSON true/false are not ids.
    if isinstance(value, bool) or not isinstance(value, int):
        raise MoleculeDecodeError(f"{where}: expected int, got {type(value).__name__}")
    return value


def _require_str(value: Any, *, where: str) -> str:
    if not isinstance(value, str):
        raise MoleculeDecodeError(f"{where}: expected str, got {type(value).__name__}")
    return value


# ----------------------------
# dict <-> Molecule
# ----------------------------


def atom_to_dict(atom: Atom) -> dict[str, Any]:
    out: dict[str, Any] = {
        "id": atom.id,
        "symbol": atom.symbol,
        "atomic_number": atom.atomic_number,
    }
    if atom.charge != 0:
        out["charge"] = atom.charge
    return out


def bond_to_dict(bond: Bond) -> dict[str, Any]:
    return {
        "atom1_id": bond.atom1_id,
        "atom2_id": bond.atom2_id,
        "bond_type": bond.bond_type,
    }


def molecule_to_dict(molecule: Molecule) -> dict[str, Any]:
    """Convert a molecule to a JSON-ready dict using the persisted bond ids as-is."""
    return {
        "atoms": [atom_to_dict(a) for a in molecule.atoms],
        "bonds": [bond_to_dict(b) for b in molecule.bonds],
        "name": molecule.name,
        "formula": molecule.formula,
    }


def _atom_from_dict(value: Any, *, where: str) -> Atom:
    obj = _require_dict(value, where=where)
    atom_id = _require_int(_require_key(obj, "id", where=where), where=f"{where}.id")
    symbol = _require_str(_require_key(obj, "symbol", where=where), where=f"{where}.symbol")
    atomic_number = _require_int(
        _require_key(obj, "atomic_number", where=where), where=f"{where}.atomic_number"
    )
    if atomic_number < 1:
        raise MoleculeDecodeError(f"{where}.atomic_number: must be >= 1, got {atomic_number}")
    charge = _require_int(_optional_key(obj, "charge", 0, where=where), where=f"{where}.charge")
    return Atom(id=atom_id, symbol=symbol, atomic_number=atomic_number, charge=charge)


def _bond_from_dict(value: Any, *, where: str) -> Bond:
    obj = _require_dict(value, where=where)
    a1 = _require_int(_require_key(obj, "atom1_id", where=where), where=f"{where}.atom1_id")
    a2 = _require_int(_require_key(obj, "atom2_id", where=where), where=f"{where}.atom2_id")
    bond_type = _require_str(_require_key(obj, "bond_type", where=where), where=f"{where}.bond_type")
    return Bond(atom1_id=a1, atom2_id=a2, bond_type=bond_type)


def molecule_from_dict(data: Any) -> Molecule:
    """Build an unresolved `Molecule` from a parsed JSON value.

    Bond links are left unset; call `Molecule.resolve_bonds()` to populate them.
    """
    obj = _require_dict(data, where=_ROOT)

    atoms_raw = _require_list(_optional_key(obj, "atoms", [], where=_ROOT), where=f"{_ROOT}.atoms")
    bonds_raw = _require_list(_optional_key(obj, "bonds", [], where=_ROOT), where=f"{_ROOT}.bonds")
    name = _require_str(_optional_key(obj, "name", "", where=_ROOT), where=f"{_ROOT}.name")
    formula = _require_str(_optional_key(obj, "formula", "", where=_ROOT), where=f"{_ROOT}.formula")

    atoms = [_atom_from_dict(a, where=f"{_ROOT}.atoms[{i}]") for i, a in enumerate(atoms_raw)]
    bonds = [_bond_from_dict(b, where=f"{_ROOT}.bonds[{i}]") for i, b in enumerate(bonds_raw)]

    return Molecule(atoms=atoms, bonds=bonds, name=name, formula=formula)


# ----------------------------
# Public API
# ----------------------------


def encode_molecule(molecule: Molecule) -> str:
    """Encode a molecule as indented JSON text.

    Side effect: every bond's `atom1_id`/`atom2_id` is overwritten from its
    resolved links before serializing.

    Raises:
        MoleculeEncodeError: a bond has an unresolved link, or the values are
            not JSON-serializable.
    """
    if not isinstance(molecule, Molecule):
        raise MoleculeEncodeError(f"encode_molecule: expected Molecule, got {type(molecule).__name__}")

    try:
        molecule.sync_bond_ids()
    except ValueError as e:
        raise MoleculeEncodeError(f"{_ROOT}.{e}") from e

    try:
        return json.dumps(molecule_to_dict(molecule), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        raise MoleculeEncodeError(f"{_ROOT}: not serializable: {e}") from e


def decode_molecule(
    text: str,
    *,
    strict_refs: bool = False,
    strict_ids: bool = False,
) -> Molecule:
    """Decode JSON text into a new `Molecule` with bond links resolved.

    Args:
        text: JSON text in the shape produced by `encode_molecule()`.
        strict_refs: If True, a bond id naming no atom is an error. By default
            such a link is left unset and decoding succeeds.
        strict_ids: If True, duplicate atom ids are an error. By default the
            last atom with a given id shadows earlier ones.

    Raises:
        MoleculeDecodeError: malformed text or a shape mismatch (and, when
            requested, dangling references or duplicate ids).
    """
    if not isinstance(text, str):
        raise MoleculeDecodeError(f"decode_molecule: expected str, got {type(text).__name__}")

    try:
        data = json.loads(text)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError is a ValueError; the int digit limit and deep nesting are not.
        raise MoleculeDecodeError(f"{_ROOT}: invalid JSON: {e}") from e

    molecule = molecule_from_dict(data)

    if strict_ids:
        dupes = molecule.duplicate_atom_ids()
        if dupes:
            raise MoleculeDecodeError(f"{_ROOT}.atoms: duplicate atom ids {dupes}")

    molecule.resolve_bonds()

    if strict_refs:
        for i, bond in enumerate(molecule.bonds):
            if bond.atom1 is None:
                raise MoleculeDecodeError(f"{_ROOT}.bonds[{i}].atom1_id: unknown atom id {bond.atom1_id}")
            if bond.atom2 is None:
                raise MoleculeDecodeError(f"{_ROOT}.bonds[{i}].atom2_id: unknown atom id {bond.atom2_id}")

    return molecule


__all__ = [
    "MoleculeDecodeError",
    "MoleculeEncodeError",
    "atom_to_dict",
    "bond_to_dict",
    "decode_molecule",
    "encode_molecule",
    "molecule_from_dict",
    "molecule_to_dict",
]
