"""Core data model for molcodec.

- `Atom` is an immutable node record.
- `Bond` persists its endpoints as integer ids; the `atom1`/`atom2` links are a
  non-persisted cache derived from those ids.
- `Molecule` owns the atom and bond sequences.

The id fields are the source of truth. Links are rebuilt with
`Molecule.resolve_bonds()` and ids are rebuilt from links with
`Molecule.sync_bond_ids()`; nothing keeps the two views in step implicitly.

This module must not import codecs/cli.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

DEFAULT_FORMULA = "H2O"
DEFAULT_NAME = "Water"


@dataclass(frozen=True)
class Atom:
    """A node record: identity, element symbol, atomic number and charge."""

    id: int
    symbol: str
    atomic_number: int
    charge: int = 0


@dataclass
class Bond:
    """An edge between two atoms.

    `atom1` and `atom2` are lookup-only references into the owning molecule's
    atom sequence. They are excluded from equality and repr.
    """

    atom1_id: Optional[int] = None
    atom2_id: Optional[int] = None
    bond_type: str = ""
    atom1: Optional[Atom] = field(default=None, compare=False, repr=False)
    atom2: Optional[Atom] = field(default=None, compare=False, repr=False)

    @classmethod
    def between(cls, atom1: Atom, atom2: Atom, bond_type: str) -> "Bond":
        """Build a bond with both the id fields and the links populated."""
        return cls(
            atom1_id=atom1.id,
            atom2_id=atom2.id,
            bond_type=bond_type,
            atom1=atom1,
            atom2=atom2,
        )

    @property
    def is_resolved(self) -> bool:
        return self.atom1 is not None and self.atom2 is not None

    def resolve(self, atoms_by_id: Mapping[int, Atom]) -> None:
        """Set the links from the id fields; unknown ids leave the link unset."""
        self.atom1 = atoms_by_id.get(self.atom1_id) if self.atom1_id is not None else None
        self.atom2 = atoms_by_id.get(self.atom2_id) if self.atom2_id is not None else None

    def sync_ids(self) -> None:
        """Overwrite the id fields from the links."""
        if self.atom1 is None:
            raise ValueError("atom1: unresolved atom reference")
        if self.atom2 is None:
            raise ValueError("atom2: unresolved atom reference")
        self.atom1_id = self.atom1.id
        self.atom2_id = self.atom2.id


@dataclass
class Molecule:
    atoms: list[Atom] = field(default_factory=list)
    bonds: list[Bond] = field(default_factory=list)
    name: str = ""
    formula: str = ""

    def ensure_formula(self) -> str:
        """Return the formula, filling in the placeholder `"H2O"` when empty.

        The placeholder is not derived from the atoms or bonds.
        """
        if not self.formula:
            self.formula = DEFAULT_FORMULA
        return self.formula

    def ensure_name(self) -> str:
        """Return the name, filling in the placeholder `"Water"` when empty."""
        if not self.name:
            self.name = DEFAULT_NAME
        return self.name

    def atoms_by_id(self) -> dict[int, Atom]:
        """Map atom id -> atom in one scan; the last atom wins on duplicate ids."""
        return {atom.id: atom for atom in self.atoms}

    def duplicate_atom_ids(self) -> list[int]:
        seen: set[int] = set()
        dupes: set[int] = set()
        for atom in self.atoms:
            if atom.id in seen:
                dupes.add(atom.id)
            seen.add(atom.id)
        return sorted(dupes)

    def resolve_bonds(self) -> None:
        """Rebuild every bond's links from its id fields."""
        lookup = self.atoms_by_id()
        for bond in self.bonds:
            bond.resolve(lookup)

    def sync_bond_ids(self) -> None:
        """Rebuild every bond's id fields from its links.

        All bonds are checked before any is modified, so a failure leaves the
        molecule untouched.
        """
        for i, bond in enumerate(self.bonds):
            if bond.atom1 is None:
                raise ValueError(f"bonds[{i}].atom1: unresolved atom reference")
            if bond.atom2 is None:
                raise ValueError(f"bonds[{i}].atom2: unresolved atom reference")
        for bond in self.bonds:
            bond.sync_ids()

    def dangling_bonds(self) -> list[Bond]:
        return [bond for bond in self.bonds if not bond.is_resolved]
