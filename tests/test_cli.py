"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from greeknames.cli.main import app


@pytest.fixture
def runner():
    return CliRunner()


class TestCorrectCommand:
    def test_text_output(self, runner):
        result = runner.invoke(app, ["correct", "Γιάννης"])
        assert result.exit_code == 0
        assert "Corrected: Γιάννης" in result.stdout
        assert "Gender: masculine" in result.stdout
        assert "Case: nominative" in result.stdout
        assert "Confidence: 100.0%" in result.stdout

    def test_json_output(self, runner):
        result = runner.invoke(app, ["correct", "Γιάννης", "--target-case", "genitive", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["corrected"] == "Γιάννη"
        assert data["greekScript"] == "Γιάννη"
        assert data["currentCase"] == "nominative"

    def test_latin_input(self, runner):
        result = runner.invoke(app, ["correct", "Giannis", "--json"])
        data = json.loads(result.stdout)
        assert data["isGreekScript"] is False
        assert data["greekScript"] == "Γιάννης"

    def test_invalid_name(self, runner):
        result = runner.invoke(app, ["correct", "   "])
        assert result.exit_code == 1
        assert "Invalid name provided" in result.output

    def test_invalid_target_case(self, runner):
        result = runner.invoke(app, ["correct", "Νίκος", "--target-case", "dative"])
        assert result.exit_code == 2

    def test_verbose_flag(self, runner):
        result = runner.invoke(app, ["--verbose", "correct", "Νίκος"])
        assert result.exit_code == 0


class TestTransliterateCommand:
    def test_greek_to_latin(self, runner):
        result = runner.invoke(app, ["transliterate", "Γιάννης"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "Giannis"

    def test_latin_to_greek(self, runner):
        result = runner.invoke(app, ["transliterate", "Thanos"])
        assert result.stdout.strip() == "Θανοσ"

    def test_explicit_target(self, runner):
        result = runner.invoke(app, ["transliterate", "Νίκος", "--to", "latin"])
        assert result.stdout.strip() == "Nikos"

    def test_unsupported_target(self, runner):
        result = runner.invoke(app, ["transliterate", "Nikos", "--to", "cyrillic"])
        assert result.exit_code == 2


class TestBatchCommand:
    @pytest.fixture
    def names_file(self, tmp_path):
        path = tmp_path / "names.txt"
        path.write_text("Γιάννης\n\nGiannis\nΠέτρος\n", encoding="utf-8")
        return path

    def test_stdout(self, runner, names_file):
        result = runner.invoke(app, ["batch", str(names_file), "--no-progress", "--target-case", "genitive"])
        assert result.exit_code == 0
        rows = [json.loads(line) for line in result.stdout.splitlines()]
        assert len(rows) == 4
        assert rows[0]["corrected"] == "Γιάννη"
        assert rows[1] == {"error": "Invalid name provided"}
        assert rows[2]["corrected"] == "Gianni"
        assert rows[3]["corrected"] == "Πέτρου"

    def test_output_file(self, runner, names_file, tmp_path):
        output = tmp_path / "out" / "results.jsonl"
        result = runner.invoke(app, ["batch", str(names_file), "--no-progress", "-o", str(output)])
        assert result.exit_code == 0
        assert "Wrote 4 results" in result.stdout
        lines = output.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 4
        assert json.loads(lines[3])["gender"] == "masculine"

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(app, ["batch", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2
