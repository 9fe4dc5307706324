"""Tests for CLI formatting helpers."""

import json

from portfoliograph.cli._format import format_table, print_json, print_lines, to_json, truncate


class TestJson:
    def test_wraps_command_and_data(self):
        assert json.loads(to_json("inspect", {"nodes": 2})) == {"command": "inspect", "data": {"nodes": 2}}

    def test_writes_file(self, tmp_path, capsys):
        out = tmp_path / "out.json"
        print_json("ls", {"portfolios": {}}, str(out))
        assert json.loads(out.read_text())["command"] == "ls"
        assert f"Wrote ls output to {out}" in capsys.readouterr().out


class TestFormatTable:
    def test_empty_rows(self):
        assert format_table(["Id", "Label"], []) == []

    def test_alignment(self):
        lines = format_table(["Id", "Label", "Contacts"], [["1", "1 Main St", "15"], ["12", "Elm", "3"]])
        assert lines[0] == "  Id  Label      Contacts"
        assert lines[1] == "  ──  ─────────  ────────"
        assert lines[2] == "   1  1 Main St        15"
        assert lines[3] == "  12  Elm               3"


class TestPrintLines:
    def test_hidden_lines_counted(self, capsys):
        print_lines([f"line {i}" for i in range(5)], limit=3)
        out = capsys.readouterr().out
        assert "line 2" in out
        assert "line 3" not in out
        assert "# ... 2 more lines" in out

    def test_nothing_for_no_lines(self, capsys):
        print_lines([])
        assert capsys.readouterr().out == ""


class TestTruncate:
    def test_short_text_unchanged(self):
        assert truncate("Jane Doe") == "Jane Doe"

    def test_long_text(self):
        result = truncate("x" * 80, 10)
        assert len(result) == 10
        assert result.endswith("…")
