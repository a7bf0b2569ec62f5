from __future__ import annotations

import json

from typer.testing import CliRunner

from molcodec.cli.commands.demo import build_water, summary_lines
from molcodec.cli.main import app
from molcodec.codecs.json_codec import decode_molecule


def test_cli_version() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["version"])
    assert res.exit_code == 0, res.output
    assert res.output.strip() == "0.1.0"


def test_cli_help_lists_commands() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["--help"])
    assert res.exit_code == 0, res.output
    assert "Encode molecules to JSON and decode them back." in res.output
    assert "demo" in res.output
    assert "version" in res.output


def test_cli_demo_prints_json_and_decoded_summary() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["demo"])
    assert res.exit_code == 0, res.output

    out = res.output
    assert out.startswith("Encoded JSON:\n")

    json_text = out.split("Encoded JSON:\n", 1)[1].split("\nDecoded Molecule:", 1)[0]
    data = json.loads(json_text)
    assert data["name"] == "Water"
    assert data["formula"] == "H2O"
    assert len(data["atoms"]) == 3
    assert all("charge" not in a for a in data["atoms"])

    assert "Name: Water" in out
    assert "Formula: H2O" in out
    assert "  ID: 3, Symbol: O, Atomic Number: 8, Charge: 0" in out
    assert "  Bond between H (ID: 1) and O (ID: 3), Type: single" in out
    assert "  Bond between H (ID: 2) and O (ID: 3), Type: single" in out


def test_cli_demo_charge_option_shows_charge_key() -> None:
    runner = CliRunner()
    res = runner.invoke(app, ["demo", "--charge-oxygen=-1"])
    assert res.exit_code == 0, res.output
    assert '"charge": -1' in res.output
    assert "Symbol: O, Atomic Number: 8, Charge: -1" in res.output


def test_build_water_links_agree_with_ids() -> None:
    m = build_water()
    for bond in m.bonds:
        assert bond.atom1 is not None and bond.atom2 is not None
        assert (bond.atom1_id, bond.atom2_id) == (bond.atom1.id, bond.atom2.id)


def test_summary_lines_mark_dangling_side() -> None:
    m = decode_molecule(
        '{"atoms": [{"id": 1, "symbol": "H", "atomic_number": 1}],'
        ' "bonds": [{"atom1_id": 1, "atom2_id": 9, "bond_type": "single"}],'
        ' "name": "Fragment", "formula": ""}'
    )
    lines = summary_lines(m)

    assert lines[0] == "Name: Fragment"
    assert lines[-1] == "  Bond between H (ID: 1) and ? (ID: 9), Type: single"
