import json

from tabletopswiss.testing.__main__ import (
    SUBCOMMANDS,
    command_help,
    create_completer,
    run_command,
)


def test_completer_accepts_both_command_forms():
    options = create_completer().options
    for command in list(SUBCOMMANDS) + ["help"]:
        assert command in options
        assert f"/{command}" in options


def test_simulate_writes_json(tmp_path, capsys):
    output = tmp_path / "event.json"
    exit_code = run_command(
        ["simulate", "--players", "10", "--rounds", "3", "--seed", "4", "--output", str(output)]
    )
    assert exit_code == 0
    assert "Standings" in capsys.readouterr().out
    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["tournament"]["status"] == "COMPLETE"


def test_validate_saved_tournament(tmp_path, capsys):
    event = tmp_path / "event.json"
    report = tmp_path / "report.json"
    run_command(["simulate", "--players", "9", "--rounds", "3", "--seed", "2", "--output", str(event)])

    exit_code = run_command(
        ["validate", "--file", str(event), "--detailed", "--export", str(report)]
    )
    assert exit_code == 0
    assert json.loads(report.read_text(encoding="utf-8"))["violations"] == []


def test_validate_missing_file(tmp_path):
    assert run_command(["validate", "--file", str(tmp_path / "missing.json")]) == 1


def test_command_help_lists_flags():
    text = command_help("simulate")
    assert "--drop-rate" in text
    assert "tabletop-swiss-test simulate" in text


def test_help_command(capsys):
    assert run_command(["help", "/validate"]) == 0
    assert "--detailed" in capsys.readouterr().out
    assert run_command(["help", "bogus"]) == 1
    assert "Unknown command: bogus" in capsys.readouterr().out
