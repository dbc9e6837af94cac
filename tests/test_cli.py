"""
Tests for the command-line interface.
"""

import json

import pytest
from typer.testing import CliRunner

from cli.main import app
from tests.fixtures import SAMPLE_PROJECT, SYNTAX_ERROR, WIDGET

runner = CliRunner()


@pytest.fixture
def widget_file(tmp_path, monkeypatch):
    """A Go file in the working directory, referenced by a short name."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "w.go").write_text(WIDGET, encoding="utf-8")
    return "w.go"


class TestTagsCommand:
    """Tests for `gotagger tags`."""

    def test_lines_output(self, widget_file):
        """Test one tab-separated line per tag."""
        result = runner.invoke(app, ["tags", widget_file])

        assert result.exit_code == 0
        lines = [line for line in result.stdout.splitlines() if "\t" in line]
        assert lines == [
            "NewWidget\tw.go\t7\t9\tfunction\tWidget\tfunc(name string) *Widget",
            "Name\tw.go\t11\t13\tmethod\t*Widget\tfunc() string",
            "String\tw.go\t15\t17\tmethod\tWidget\tfunc() string",
        ]

    def test_json_output(self, widget_file):
        """Test the JSON array output."""
        result = runner.invoke(app, ["tags", widget_file, "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["name"] for item in data] == ["NewWidget", "Name", "String"]
        assert data[1]["receiver_names"] == [["w"]]

    def test_table_output(self, widget_file):
        """Test the rich table output."""
        result = runner.invoke(app, ["tags", widget_file, "-f", "table"])

        assert result.exit_code == 0
        assert "NewWidget" in result.output
        assert "method" in result.output

    def test_directory_argument(self):
        """Test that directories expand and parse errors are reported."""
        result = runner.invoke(app, ["tags", str(SAMPLE_PROJECT)])

        assert result.exit_code == 0
        assert "NewCircle" in result.output
        assert "Vendored" not in result.output
        assert "parse errors" in result.output

    def test_whole_program_flag(self):
        """Test that whole-program mode links constructors across files."""
        shapes = SAMPLE_PROJECT / "shapes"
        default = runner.invoke(app, ["tags", str(shapes)])
        shared = runner.invoke(app, ["tags", str(shapes), "--whole-program"])

        unit_default = [l for l in default.stdout.splitlines() if l.startswith("NewUnitCircle")]
        unit_shared = [l for l in shared.stdout.splitlines() if l.startswith("NewUnitCircle")]
        assert unit_default[0].split("\t")[5] == ""
        assert unit_shared[0].split("\t")[5] == "Circle"

    def test_missing_path(self, tmp_path):
        """Test that a missing path exits with an error."""
        result = runner.invoke(app, ["tags", str(tmp_path / "missing.go")])

        assert result.exit_code == 1

    def test_only_broken_file(self, tmp_path):
        """Test that parse failures do not change the exit code."""
        path = tmp_path / "bad.go"
        path.write_text(SYNTAX_ERROR, encoding="utf-8")

        result = runner.invoke(app, ["tags", str(path)])

        assert result.exit_code == 0
        assert "bad.go" in result.output

    def test_error_names_file_once(self, tmp_path, monkeypatch):
        """Test that each skipped file is listed with its location once."""
        monkeypatch.chdir(tmp_path)
        (tmp_path / "bad.go").write_text(SYNTAX_ERROR, encoding="utf-8")

        result = runner.invoke(app, ["tags", "bad.go"])

        assert result.exit_code == 0
        assert "• bad.go:" in result.output
        assert "bad.go: bad.go" not in result.output


class TestSummaryCommand:
    """Tests for `gotagger summary`."""

    def test_summary(self, widget_file):
        """Test the classification summary."""
        result = runner.invoke(app, ["summary", widget_file])

        assert result.exit_code == 0
        assert "Methods" in result.output
        assert "Constructors" in result.output


class TestVersion:
    """Tests for the version option."""

    def test_version(self):
        """Test that --version prints the version and exits."""
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert "0.1.0" in result.output
