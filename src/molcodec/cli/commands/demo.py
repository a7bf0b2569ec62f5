"""`molcodec demo` command.

Builds a water molecule in memory, encodes it, decodes the text back and
prints both the JSON and a summary of the decoded graph:
- atoms are listed in sequence order
- bonds are listed with their endpoint symbols; an unresolved side prints `?`
"""

from __future__ import annotations

import pandas as pd
import typer

from molcodec.codecs.json_codec import MoleculeDecodeError, MoleculeEncodeError, decode_molecule, encode_molecule
from molcodec.core.model import Atom, Bond, Molecule
from molcodec.core.tables import atoms_frame, bonds_frame


def build_water(*, oxygen_charge: int = 0) -> Molecule:
    h1 = Atom(id=1, symbol="H", atomic_number=1)
    h2 = Atom(id=2, symbol="H", atomic_number=1)
    o = Atom(id=3, symbol="O", atomic_number=8, charge=oxygen_charge)
    return Molecule(
        atoms=[h1, h2, o],
        bonds=[Bond.between(h1, o, "single"), Bond.between(h2, o, "single")],
    )


def _na(value: object, placeholder: str = "?") -> str:
    return placeholder if pd.isna(value) else str(value)


def summary_lines(molecule: Molecule) -> list[str]:
    """Human-readable summary of a (decoded) molecule."""
    lines = [
        f"Name: {molecule.name}",
        f"Formula: {molecule.formula}",
        "Atoms:",
    ]
    for row in atoms_frame(molecule).itertuples(index=False):
        lines.append(
            f"  ID: {row.id}, Symbol: {row.symbol}, Atomic Number: {row.atomic_number}, Charge: {row.charge}"
        )
    lines.append("Bonds:")
    for row in bonds_frame(molecule).itertuples(index=False):
        lines.append(
            f"  Bond between {_na(row.atom1_symbol)} (ID: {_na(row.atom1_id)}) and "
            f"{_na(row.atom2_symbol)} (ID: {_na(row.atom2_id)}), Type: {row.bond_type}"
        )
    return lines


def register(app: typer.Typer) -> None:
    @app.command("demo")
    def demo(
        oxygen_charge: int = typer.Option(0, "--charge-oxygen", help="Formal charge to put on the oxygen atom."),
    ) -> None:
        """Encode a water molecule to JSON and decode it back."""
        water = build_water(oxygen_charge=oxygen_charge)
        water.ensure_formula()
        water.ensure_name()

        try:
            text = encode_molecule(water)
            decoded = decode_molecule(text)
        except (MoleculeEncodeError, MoleculeDecodeError) as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(code=1) from e

        typer.echo("Encoded JSON:")
        typer.echo(text)
        typer.echo("Decoded Molecule:")
        for line in summary_lines(decoded):
            typer.echo(line)
