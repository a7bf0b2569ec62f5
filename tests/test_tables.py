from __future__ import annotations

import pandas as pd

from conftest import make_water
from molcodec.codecs.json_codec import decode_molecule
from molcodec.core.model import Molecule
from molcodec.core.tables import TABLE_COLUMN_ORDER, atoms_frame, bonds_frame


def test_atoms_frame_columns_dtypes_and_order() -> None:
    df = atoms_frame(make_water())

    expected = pd.DataFrame(
        {
            "id": [1, 2, 3],
            "symbol": ["H", "H", "O"],
            "atomic_number": [1, 1, 8],
            "charge": [0, 0, 0],
        }
    ).astype({"id": "Int64", "symbol": "string", "atomic_number": "Int64", "charge": "Int64"})
    pd.testing.assert_frame_equal(df, expected)
    assert tuple(df.columns) == TABLE_COLUMN_ORDER["atoms"]


def test_bonds_frame_symbols_from_links() -> None:
    df = bonds_frame(make_water())

    assert tuple(df.columns) == TABLE_COLUMN_ORDER["bonds"]
    assert df["atom1_symbol"].tolist() == ["H", "H"]
    assert df["atom2_symbol"].tolist() == ["O", "O"]
    assert df["atom1_id"].tolist() == [1, 2]


def test_bonds_frame_dangling_side_is_na() -> None:
    m = decode_molecule(
        '{"atoms": [{"id": 1, "symbol": "H", "atomic_number": 1}],'
        ' "bonds": [{"atom1_id": 1, "atom2_id": 9, "bond_type": "single"}]}'
    )
    df = bonds_frame(m)

    assert df.loc[0, "atom1_symbol"] == "H"
    assert pd.isna(df.loc[0, "atom2_symbol"])
    assert df.loc[0, "atom2_id"] == 9


def test_empty_molecule_frames_keep_schema() -> None:
    m = Molecule()
    atoms = atoms_frame(m)
    bonds = bonds_frame(m)

    assert len(atoms) == 0 and len(bonds) == 0
    assert str(atoms["id"].dtype) == "Int64"
    assert str(bonds["bond_type"].dtype) == "string"


def test_atoms_frame_ids_beyond_int64_fall_back_to_object() -> None:
    big = 2**70
    m = decode_molecule(
        '{"atoms": [{"id": %d, "symbol": "H", "atomic_number": 1},'
        ' {"id": 2, "symbol": "O", "atomic_number": 8}],'
        ' "bonds": [{"atom1_id": %d, "atom2_id": 2, "bond_type": "single"}]}' % (big, big)
    )

    atoms = atoms_frame(m)
    bonds = bonds_frame(m)

    assert atoms["id"].dtype == object
    assert atoms["id"].tolist() == [big, 2]
    assert str(atoms["atomic_number"].dtype) == "Int64"
    assert bonds["atom1_id"].dtype == object
    assert bonds.loc[0, "atom1_id"] == big
    assert str(bonds["atom2_id"].dtype) == "Int64"
    assert bonds.loc[0, "atom1_symbol"] == "H"
