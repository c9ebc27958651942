"""Tests for the command line interface."""

import io
import json

from legal_form.cli.normalize_names import main


def _records(text):
    return [json.loads(line) for line in text.splitlines()]


def test_names_from_arguments(capsys):
    exit_code = main(["Example GmbH & Co. KG", "Acme Widgets", "--country", "DE"])

    records = _records(capsys.readouterr().out)
    assert exit_code == 0
    assert records[0]["company"] == "Example"
    assert records[0]["legal_form"] == "GmbH & Co. KG"
    assert records[0]["country"] == "DE"
    assert records[1]["legal_form"] == ""
    assert records[1]["alias"] is None
    assert records[1]["key"] == "acmewidgets|"


def test_names_from_input_file(tmp_path):
    input_path = tmp_path / "names.txt"
    input_path.write_text("Example Incorporated\n\nExample GmbH (Foobar)\n", encoding="utf-8")
    output_path = tmp_path / "out.jsonl"

    exit_code = main(
        ["--input", str(input_path), "--output", str(output_path), "--mode", "middle"]
    )

    records = _records(output_path.read_text(encoding="utf-8"))
    assert exit_code == 0
    assert [r["alias"] for r in records] == ["inc", "gmbh"]
    assert records[1]["trailing"] == "(Foobar)"


def test_names_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Example LLC\n"))

    exit_code = main([])

    records = _records(capsys.readouterr().out)
    assert exit_code == 0
    assert records[0]["alias"] == "llc"


def test_missing_config(tmp_path):
    assert main(["--config", str(tmp_path / "missing.yaml"), "Example LLC"]) == 1


def test_missing_input(tmp_path):
    assert main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_config_file(tmp_path, capsys):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("DEFAULT_COUNTRY: IN\nLOG_LEVEL: WARNING\n")

    exit_code = main(["--config", str(config_path), "Foo Pvt. Ltd."])

    records = _records(capsys.readouterr().out)
    assert exit_code == 0
    assert records[0]["country"] == "IN"
    assert records[0]["alias"] == "pvtltd"
