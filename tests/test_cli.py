from __future__ import annotations

import json

import pytest
from openpyxl import load_workbook

from epp2json import cli
from epp2json.commands import convert


def _header(invoice_type: str, number: str, contractor_name: str = "ACME") -> str:
    fields = [""] * 47
    fields[0] = invoice_type
    fields[4] = number
    fields[12] = contractor_name
    fields[22] = "20230315000000"
    fields[29] = "123.00"
    return ",".join(f'"{value}"' for value in fields)


def _write_epp(path, *headers: str) -> None:
    parts = ['[INFO]\n"1.11",0,1250,"Subiekt GT","SGT","Firma"\n']
    for header in headers:
        parts.append(f"[NAGLOWEK]\n{header}\n[ZAWARTOSC]\n\"23\",1,100,23,123,100,23,123\n")
    path.write_bytes("".join(parts).encode("cp1250"))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("EPP2JSON_INCLUDE_FZ", raising=False)
    monkeypatch.delenv("EPP2JSON_INCLUDE_FS", raising=False)


def test_convert_writes_json_and_prints_summary(tmp_path, capsys):
    source = tmp_path / "eksport.epp"
    output = tmp_path / "faktury.json"
    _write_epp(
        source,
        _header("FZ", "FZ 1"),
        _header("FS", "FS 1"),
        _header("FS", "FS 2"),
        _header("KFS", "KFS 1"),
    )

    code = cli.main(["convert", "--input", str(source), "--output", str(output)])

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["info"]["system"] == "Subiekt GT"
    assert [invoice["numer"] for invoice in data["faktury"]] == [
        "FZ 1",
        "FS 1",
        "FS 2",
        "KFS 1",
    ]
    stdout = capsys.readouterr().out
    assert "Przetworzono 4 faktur" in stdout
    assert "Faktury zakupowe (FZ): 1" in stdout
    assert "Faktury sprzedażowe (FS): 2" in stdout


def test_convert_fz_only_drops_sale_corrections(tmp_path):
    source = tmp_path / "eksport.epp"
    output = tmp_path / "faktury.json"
    _write_epp(source, _header("FS", "FS 1"), _header("KFS", "KFS 1"))

    code = convert.main(["-i", str(source), "-o", str(output), "--fz-only"])

    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert [invoice["typ"] for invoice in data["faktury"]] == ["FS"]


def test_convert_reports_missing_input(tmp_path, capsys):
    code = cli.main(
        [
            "convert",
            "--input",
            str(tmp_path / "missing.epp"),
            "--output",
            str(tmp_path / "out.json"),
        ]
    )

    assert code == 1
    assert "Błąd (file open)" in capsys.readouterr().err
    assert not (tmp_path / "out.json").exists()


def test_convert_reports_header_parse_failure(tmp_path, capsys):
    source = tmp_path / "eksport.epp"
    _write_epp(source, '"FZ,"broken')

    code = convert.main(["-i", str(source), "-o", str(tmp_path / "out.json")])

    assert code == 1
    assert "Błąd (header parse)" in capsys.readouterr().err


def test_report_command_writes_workbook(tmp_path, capsys):
    source = tmp_path / "eksport.epp"
    _write_epp(source, _header("FZ", "FZ 1"), _header("FS", "FS 1"))

    code = cli.main(["report", str(source)])

    assert code == 0
    destination = tmp_path / "eksport_raport.xlsx"
    assert str(destination) in capsys.readouterr().out
    workbook = load_workbook(destination)
    assert workbook.sheetnames == ["Podsumowanie", "Miesiące"]


def test_validate_command_exit_codes(tmp_path, capsys):
    clean = tmp_path / "clean.epp"
    dirty = tmp_path / "dirty.epp"
    _write_epp(clean, _header("FS", "FS 1"))
    _write_epp(dirty, _header("FS", "", contractor_name=""))

    assert cli.main(["validate", str(clean)]) == 0
    assert "Wszystkie faktury są prawidłowe!" in capsys.readouterr().out

    log = tmp_path / "problemy.xlsx"
    assert cli.main(["validate", str(dirty), "--log", str(log)]) == 2
    stdout = capsys.readouterr().out
    assert "Znaleziono 2 problemów:" in stdout
    assert log.exists()


def test_help_is_forwarded_to_command(capsys):
    assert cli.main(["convert", "--help"]) == 0
    assert "--fz-only" in capsys.readouterr().out


def test_top_level_help_lists_commands(capsys):
    assert cli.main(["--help"]) == 0

    stdout = capsys.readouterr().out
    for name in ("convert", "report", "validate"):
        assert name in stdout


def test_convert_is_the_default_command(tmp_path, capsys):
    source = tmp_path / "eksport.epp"
    output = tmp_path / "faktury.json"
    _write_epp(source, _header("FS", "FS 1"))

    assert cli.main(["-i", str(source), "-o", str(output)]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [invoice["numer"] for invoice in data["faktury"]] == ["FS 1"]
    assert "Faktury sprzedażowe (FS): 1" in capsys.readouterr().out


def test_split_command():
    assert cli.split_command(["report", "a.epp"]) == ("report", ["a.epp"])
    assert cli.split_command(["-i", "a.epp"]) == ("convert", ["-i", "a.epp"])
    assert cli.split_command([]) == ("convert", [])


def test_unknown_command_is_a_usage_error(capsys):
    assert cli.main(["nope"]) == 2
    assert "nope" in capsys.readouterr().err


def test_convert_simple_output(tmp_path):
    source = tmp_path / "eksport.epp"
    output = tmp_path / "uproszczone.json"
    _write_epp(source, _header("FZ", "FZ 1"), _header("FS", "FS 1", contractor_name="Żabka"))

    assert cli.main(["convert", "-i", str(source), "-o", str(output), "--simple"]) == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert [row["numer"] for row in data] == ["FZ 1", "FS 1"]
    assert data[1]["kontrahent"] == "Żabka"
    assert data[1]["kwota"] == 123.0
    assert data[1]["data"] == "2023-03-15T00:00:00Z"
    assert data[1]["liczba_pozycji"] == 1
