"""Tests for the link, links and follow commands."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from notectl.cli import cli


def _invoke_json(cli_runner: CliRunner, *args: str) -> dict:
    result = cli_runner.invoke(cli, ["--json", *args])
    assert result.exit_code == 0, result.output
    return json.loads(result.stdout)["data"]


@pytest.fixture
def two_notes(cli_runner: CliRunner, _isolated_store: None) -> tuple[dict, dict]:
    a = _invoke_json(cli_runner, "new", "Alpha", "-c", "economics")
    b = _invoke_json(cli_runner, "new", "Beta", "-c", "politics")
    return a, b


class TestLinkCommand:
    def test_link(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        data = _invoke_json(cli_runner, "link", a["filename"], b["id"])
        assert data["target"] == b["filename"]
        assert f"^^ {b['filename']}" in Path(a["path"]).read_text(encoding="utf-8")
        assert f"@@ {a['filename']}" in Path(b["path"]).read_text(encoding="utf-8")

    def test_link_with_path_source(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        data = _invoke_json(cli_runner, "link", a["path"], b["id"])
        assert data["source"] == a["filename"]

    def test_link_at_offset(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        _invoke_json(cli_runner, "link", a["filename"], b["id"], "--at", "0")
        assert Path(a["path"]).read_text(encoding="utf-8").startswith(f"^{b['id']}title: ")

    def test_negative_offset_rejected(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        result = cli_runner.invoke(cli, ["link", a["filename"], b["id"], "--at", "-1"])
        assert result.exit_code == 2

    def test_missing_target(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, _ = two_notes
        before = Path(a["path"]).read_bytes()
        result = cli_runner.invoke(cli, ["--json", "link", a["filename"], "19990101_000000"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NOT_FOUND"
        assert Path(a["path"]).read_bytes() == before

    def test_human_error(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, _ = two_notes
        result = cli_runner.invoke(cli, ["link", a["filename"], "19990101_000000"])
        assert result.exit_code == 1
        assert "ERROR" in result.stderr


class TestLinksCommand:
    def test_incoming_default(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        _invoke_json(cli_runner, "link", a["filename"], b["id"])
        data = _invoke_json(cli_runner, "links", b["filename"])
        assert data["items"] == [a["filename"]]

    def test_direction(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        _invoke_json(cli_runner, "link", a["filename"], b["id"])
        data = _invoke_json(cli_runner, "links", a["filename"], "--direction", "outgoing")
        assert data["items"] == [b["filename"]]

    def test_quiet_lists_filenames(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        _invoke_json(cli_runner, "link", a["filename"], b["id"])
        result = cli_runner.invoke(cli, ["-q", "links", b["filename"]])
        assert result.stdout.strip() == a["filename"]

    def test_bad_direction(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, _ = two_notes
        result = cli_runner.invoke(cli, ["links", a["filename"], "--direction", "up"])
        assert result.exit_code == 2


class TestFollowCommand:
    def test_follow(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        _invoke_json(cli_runner, "link", a["filename"], b["id"])
        result = cli_runner.invoke(cli, ["-q", "follow", a["filename"], b["filename"]])
        assert result.exit_code == 0
        assert Path(result.stdout.strip()).samefile(b["path"])

    def test_follow_unreferenced(self, cli_runner: CliRunner, two_notes: tuple[dict, dict]) -> None:
        a, b = two_notes
        result = cli_runner.invoke(cli, ["--json", "follow", a["filename"], b["filename"]])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "NOT_FOUND"
