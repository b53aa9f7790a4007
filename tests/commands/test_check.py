"""Tests for the check command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from notectl.cli import cli


def _json(cli_runner: CliRunner, *args: str) -> dict:
    result = cli_runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)


@pytest.fixture
def one_sided(cli_runner: CliRunner, _isolated_store: None) -> tuple[dict, dict]:
    """Two linked notes with the incoming line removed from the target."""
    a = _json(cli_runner, "new", "Alpha")["data"]
    b = _json(cli_runner, "new", "Beta")["data"]
    _json(cli_runner, "link", a["filename"], b["id"])
    target = Path(b["path"])
    text = target.read_text(encoding="utf-8").replace(f"@@ {a['filename']}\n", "")
    target.write_text(text, encoding="utf-8")
    return a, b


class TestCheckCommand:
    @pytest.mark.usefixtures("_isolated_store")
    def test_empty_store(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "No issues found" in result.stdout

    def test_reports_one_sided(self, cli_runner: CliRunner, one_sided: tuple[dict, dict]) -> None:
        payload = _json(cli_runner, "check")
        assert payload["op"] == "check"
        assert [i["category"] for i in payload["data"]["issues"]] == ["one_sided_link"]

    def test_human_report(self, cli_runner: CliRunner, one_sided: tuple[dict, dict]) -> None:
        result = cli_runner.invoke(cli, ["check"])
        assert result.exit_code == 0
        assert "one_sided_link" in result.stdout
        assert "1 errors, 0 warnings" in result.stdout

    def test_errors_only(self, cli_runner: CliRunner, _isolated_store: None, tmp_path: Path) -> None:
        notes = tmp_path / "notes"
        notes.mkdir()
        (notes / "20201008_090000----bare.txt").write_text("no header\n", encoding="utf-8")
        assert _json(cli_runner, "check")["data"]["count"] == 1
        assert _json(cli_runner, "check", "--errors-only")["data"]["count"] == 0

    def test_fix(self, cli_runner: CliRunner, one_sided: tuple[dict, dict]) -> None:
        a, b = one_sided
        payload = _json(cli_runner, "check", "--fix")
        assert payload["op"] == "fix"
        assert payload["data"]["count"] == 1
        assert f"@@ {a['filename']}" in Path(b["path"]).read_text(encoding="utf-8")
        assert _json(cli_runner, "check")["data"]["count"] == 0
