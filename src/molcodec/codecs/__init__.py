"""Codecs for converting molecules to and from text formats.

Only JSON is supported.
"""

from __future__ import annotations

from .json_codec import MoleculeDecodeError, MoleculeEncodeError, decode_molecule, encode_molecule

__all__ = [
    "MoleculeDecodeError",
    "MoleculeEncodeError",
    "decode_molecule",
    "encode_molecule",
]
