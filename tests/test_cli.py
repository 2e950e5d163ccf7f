import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from cli import cli


# ---- Fixtures ----
@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


# ---- Tests ----
class TestParseCommands:
    def test_parse_id(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-id", "arXiv:9912.12345v2"])
        assert result.exit_code == 0
        assert "id: arXiv:9912.12345v2" in result.output
        assert "year: 2099" in result.output
        assert "version: 2" in result.output

    def test_parse_id_latest(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-id", "arXiv:1501.00001"])
        assert result.exit_code == 0
        assert "number: 00001" in result.output
        assert "version: latest" in result.output

    def test_parse_id_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-id", "arXiv:1513.00001"])
        assert result.exit_code == 1
        assert "Error: Invalid month 13" in result.output

    def test_parse_category(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-category", "astro-ph.HE"])
        assert result.exit_code == 0
        assert "group: physics" in result.output
        assert "archive: astro-ph" in result.output
        assert "subject: HE" in result.output

    def test_parse_category_legacy(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-category", "alg-geom"])
        assert result.exit_code == 1

        result = runner.invoke(cli, ["parse-category", "--legacy", "alg-geom"])
        assert result.exit_code == 0
        assert "category: math.AG" in result.output

    def test_parse_stamp(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-stamp", "arXiv:2001.00001 [cs.LG] 1 Jan 2000"])
        assert result.exit_code == 0
        assert "category: cs.LG" in result.output
        assert "submitted: 2000-01-01" in result.output

    def test_parse_stamp_invalid(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["parse-stamp", "arXiv:2001.00001 [cs.LG 1 Jan 2000"])
        assert result.exit_code == 1
        assert "Error: Invalid category" in result.output


class TestCheckCommand:
    def test_check_text(self, runner: CliRunner, text_stamp_file: Callable[[list[str]], Path]) -> None:
        file_path = text_stamp_file(["arXiv:2001.00001 [cs.LG] 1 Jan 2000", "arXiv:2001.00002 2 Jan 2000"])

        result = runner.invoke(cli, ["check", str(file_path)])

        assert result.exit_code == 0
        assert "1: ok" in result.output
        assert "Checked 2 stamps: 2 valid, 0 invalid." in result.output

    def test_check_reports_invalid(self, runner: CliRunner, text_stamp_file: Callable[[list[str]], Path]) -> None:
        file_path = text_stamp_file(["arXiv:2001.00001 [cs.LG] 1 Jan 2000", "arXiv:2001.00001"])

        result = runner.invoke(cli, ["check", str(file_path)])

        assert result.exit_code == 1
        assert "2: invalid: Not enough components" in result.output
        assert "1 valid, 1 invalid" in result.output

    def test_check_json(
        self,
        runner: CliRunner,
        json_stamp_file: Callable[[list[dict[str, Any] | str]], Path],
    ) -> None:
        file_path = json_stamp_file([{"stamp": "arXiv:2001.00001 [cs.LG] 1 Jan 2000"}])

        result = runner.invoke(cli, ["check", "--format", "json", "--output", "json", str(file_path)])

        assert result.exit_code == 0
        record = json.loads(result.output.strip())
        assert record["valid"] is True
        assert record["category"] == "cs.LG"

    def test_check_json_missing_field(
        self,
        runner: CliRunner,
        json_stamp_file: Callable[[list[dict[str, Any] | str]], Path],
    ) -> None:
        file_path = json_stamp_file([{"title": "No stamp"}])

        result = runner.invoke(cli, ["check", "--format", "json", str(file_path)])

        assert result.exit_code == 1
        assert "Error: Missing required field" in result.output
