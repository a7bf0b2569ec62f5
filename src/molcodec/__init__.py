"""molcodec: molecule model with a JSON round-trip codec.

Atoms and bonds live in a `Molecule`; bonds persist integer atom ids and keep
resolved atom links as a derived, non-serialized cache.
"""

from __future__ import annotations

from molcodec.codecs import MoleculeDecodeError, MoleculeEncodeError, decode_molecule, encode_molecule
from molcodec.core import Atom, Bond, Molecule

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Atom",
    "Bond",
    "Molecule",
    "MoleculeDecodeError",
    "MoleculeEncodeError",
    "decode_molecule",
    "encode_molecule",
]
