"""Tests for the schema-compare command line interface."""

from __future__ import annotations

import json
import sys

import pytest
import yaml
from click.testing import CliRunner

from samples import OLD_SCHEMA_XML
from schema_compare import __version__
from schema_compare.cli.main import cli, main
from schema_compare.cli.utils import format_file_size


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "SCHEMA_COMPARE_CONFIG",
        "SCHEMA_COMPARE_LOG_LEVEL",
        "SCHEMA_COMPARE_LOG_FILE",
        "SCHEMA_COMPARE_REPORT__VIEW",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ---------------------------------------------------------------------------
# compare
# ---------------------------------------------------------------------------


class TestCompareCommand:
    def test_differences(self, runner, old_archive, new_archive):
        result = runner.invoke(cli, ["compare", str(old_archive), str(new_archive)])
        assert result.exit_code == 0, result.output
        assert "sales_v1.zip" in result.output
        assert "+3 Added" in result.output
        assert "Customers" in result.output
        assert "Products" in result.output
        assert "Schemas are identical" not in result.output

    def test_similarities_view(self, runner, old_archive, new_archive):
        result = runner.invoke(
            cli, ["compare", str(old_archive), str(new_archive), "--view", "similarities"]
        )
        assert result.exit_code == 0, result.output
        assert "Similar tables" in result.output
        assert "Added tables" not in result.output

    def test_view_from_configuration(self, runner, old_archive, new_archive, monkeypatch):
        monkeypatch.setenv("SCHEMA_COMPARE_REPORT__VIEW", "similarities")
        result = runner.invoke(cli, ["compare", str(old_archive), str(new_archive)])
        assert result.exit_code == 0, result.output
        assert "Similar tables" in result.output

    def test_category_filter(self, runner, old_archive, new_archive):
        result = runner.invoke(
            cli, ["compare", str(old_archive), str(new_archive), "--category", "joins"]
        )
        assert result.exit_code == 0, result.output
        assert "JOINS" in result.output
        assert "COLUMNS" not in result.output

    def test_save_json_report(self, runner, old_archive, new_archive, tmp_path):
        output = tmp_path / "reports" / "diff.json"
        result = runner.invoke(
            cli,
            [
                "compare",
                str(old_archive),
                str(new_archive),
                "-o",
                str(output),
                "--format",
                "json",
            ],
        )
        assert result.exit_code == 0, result.output
        assert "Report saved to" in result.output
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["summary"] == {"added": 3, "removed": 3, "changed": 2, "similar": 2}

    def test_save_text_report(self, runner, old_archive, new_archive, tmp_path):
        output = tmp_path / "diff.txt"
        result = runner.invoke(
            cli, ["compare", str(old_archive), str(new_archive), "-o", str(output)]
        )
        assert result.exit_code == 0, result.output
        assert "Schema Comparison Report" in output.read_text(encoding="utf-8")

    def test_fail_on_changes(self, runner, old_archive, new_archive):
        result = runner.invoke(
            cli, ["compare", str(old_archive), str(new_archive), "--fail-on-changes"]
        )
        assert result.exit_code == 1
        assert "Schema differences found" in result.output

    def test_identical_archives(self, runner, make_archive):
        first = make_archive("a.zip", {"a_schema.xml": OLD_SCHEMA_XML})
        second = make_archive("b.zip", {"b_schema.xml": OLD_SCHEMA_XML})
        result = runner.invoke(cli, ["compare", str(first), str(second), "--fail-on-changes"])
        assert result.exit_code == 0, result.output
        assert "Schemas are identical" in result.output


class TestCompareErrors:
    def test_not_a_zip_name(self, runner, old_archive, tmp_path):
        path = tmp_path / "schema.xml"
        path.write_text(OLD_SCHEMA_XML)
        result = runner.invoke(cli, ["compare", str(old_archive), str(path)])
        assert result.exit_code == 2
        assert "Expected a .zip archive" in result.output

    def test_missing_file(self, runner, old_archive, tmp_path):
        result = runner.invoke(cli, ["compare", str(old_archive), str(tmp_path / "nope.zip")])
        assert result.exit_code == 2

    def test_corrupt_archive(self, runner, old_archive, tmp_path):
        path = tmp_path / "corrupt.zip"
        path.write_bytes(b"not a zip")
        result = runner.invoke(cli, ["compare", str(old_archive), str(path)])
        assert result.exit_code == 3
        assert "Archive Error" in result.output

    def test_corrupt_member_data(self, runner, old_archive, make_archive):
        path = make_archive("damaged.zip", {"a_schema.xml": OLD_SCHEMA_XML})
        data = bytearray(path.read_bytes())
        data[data.index(b"<tables>") + 1] ^= 0x20
        path.write_bytes(bytes(data))
        result = runner.invoke(cli, ["compare", str(old_archive), str(path)])
        assert result.exit_code == 3
        assert "Archive Error" in result.output

    def test_missing_schema_member(self, runner, old_archive, make_archive):
        path = make_archive("data.zip", {"data.csv": "a,b\n"})
        result = runner.invoke(cli, ["compare", str(old_archive), str(path)])
        assert result.exit_code == 3
        assert "No schema XML file found" in result.output
        assert "Added" not in result.output

    def test_malformed_schema(self, runner, old_archive, make_archive):
        path = make_archive("broken.zip", {"broken_schema.xml": "<schema><tables>"})
        result = runner.invoke(cli, ["compare", str(old_archive), str(path)])
        assert result.exit_code == 4
        assert "broken_schema.xml" in result.output

    def test_invalid_config_file(self, runner, old_archive, new_archive, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("report:\n  view: everything\n")
        result = runner.invoke(
            cli, ["--config", str(config), "compare", str(old_archive), str(new_archive)]
        )
        assert result.exit_code == 2
        assert "Configuration Error" in result.output


# ---------------------------------------------------------------------------
# config
# ---------------------------------------------------------------------------


class TestConfigCommands:
    def test_show(self, runner):
        result = runner.invoke(cli, ["config", "show"])
        assert result.exit_code == 0, result.output
        assert "Configuration Summary" in result.output
        assert "_schema.xml" in result.output

    def test_show_yaml(self, runner, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("keys:\n  tables: [caption]\n")
        result = runner.invoke(cli, ["--config", str(config), "config", "show", "--yaml"])
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(result.output)
        assert data["keys"]["tables"] == ["caption"]
        assert data["loader"]["schema_marker"] == "_schema.xml"

    def test_validate(self, runner, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("loader:\n  schema_marker: model.xml\n")
        result = runner.invoke(cli, ["config", "validate", str(config)])
        assert result.exit_code == 0, result.output
        assert "Configuration is valid!" in result.output

    def test_validate_invalid(self, runner, tmp_path):
        config = tmp_path / "config.yaml"
        config.write_text("logging:\n  level: LOUD\n")
        result = runner.invoke(cli, ["config", "validate", str(config)])
        assert result.exit_code == 2
        assert "Configuration Error" in result.output


# ---------------------------------------------------------------------------
# entry point and helpers
# ---------------------------------------------------------------------------


class TestEntryPoint:
    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_main_returns_exit_code(self, monkeypatch, old_archive, new_archive):
        monkeypatch.setattr(
            sys,
            "argv",
            ["schema-compare", "compare", str(old_archive), str(new_archive), "--fail-on-changes"],
        )
        assert main() == 1

    def test_main_usage_error(self, monkeypatch, tmp_path):
        monkeypatch.setattr(sys, "argv", ["schema-compare", "compare", str(tmp_path / "x.zip")])
        assert main() == 2


class TestFormatFileSize:
    @pytest.mark.parametrize(
        "size,expected",
        [
            (0, "0 Bytes"),
            (512, "512 Bytes"),
            (1536, "1.5 KB"),
            (1048576, "1 MB"),
            (3 * 1024**3, "3 GB"),
        ],
    )
    def test_format(self, size, expected):
        assert format_file_size(size) == expected
