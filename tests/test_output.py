"""Tests for JSON/YAML serialisation and the Rich terminal views."""

import json

import pytest
import yaml
from rich.console import Console

from gitpane.git import parse_branches, parse_diff, parse_status
from gitpane.git.models import CommitResult, FileChangeStatus, FileStatusRecord, HunkHeader
from gitpane.output import serialize, terminal


class TestSerialize:
    def test_status_json(self, sample_status):
        records = parse_status(sample_status).value
        data = json.loads(serialize.render(records, "json"))
        assert data[0] == {"path": "modified.txt", "status": "modified", "staged": False}
        assert data[4]["status"] == "untracked"

    def test_branches_yaml(self, sample_branches):
        records = parse_branches(sample_branches).value
        data = yaml.safe_load(serialize.render(records, "yaml"))
        assert data[0] == {"name": "main", "is_current": True, "is_remote": False}

    def test_diff_json(self, sample_diff_multi):
        diff = parse_diff("multi.txt", sample_diff_multi).value
        data = json.loads(serialize.render(diff, "json"))
        assert data["file_path"] == "multi.txt"
        assert data["diff"] == sample_diff_multi
        assert data["hunks"][1]["new_start"] == 11
        assert data["hunks"][1]["lines"] == [" line10", "-removed line", " line11"]

    def test_hunk_header_has_no_lines(self):
        data = serialize.to_dict(HunkHeader("@@ -1 +1 @@", 1, 0, 1, 0))
        assert "lines" not in data

    def test_commit_result(self):
        data = serialize.to_dict(CommitResult(success=True, commit_sha="abc1234", message="m"))
        assert data == {"success": True, "commit_sha": "abc1234", "message": "m"}

    def test_empty_list(self):
        assert json.loads(serialize.render([], "json")) == []

    def test_unknown_format(self):
        with pytest.raises(ValueError):
            serialize.render([], "xml")

    def test_unknown_type(self):
        with pytest.raises(TypeError):
            serialize.to_dict(object())  # type: ignore[arg-type]


def _console() -> Console:
    return Console(record=True, width=120, color_system=None)


class TestTerminal:
    def test_status_table(self, sample_status):
        console = _console()
        terminal.render_status(parse_status(sample_status).value, console=console)
        text = console.export_text()
        assert "untracked.txt" in text
        assert "6 file(s)" in text

    def test_clean_tree(self):
        console = _console()
        terminal.render_status([], console=console)
        assert "clean" in console.export_text()

    def test_summary_optional(self):
        console = _console()
        record = FileStatusRecord("a.txt", FileChangeStatus.ADDED, True)
        terminal.render_status([record], show_summary=False, console=console)
        assert "file(s)" not in console.export_text()

    def test_branches_mark_current(self, sample_branches):
        console = _console()
        terminal.render_branches(parse_branches(sample_branches).value, console=console)
        assert "* main" in console.export_text()

    def test_diff_view(self, sample_diff_multi):
        console = _console()
        terminal.render_diff(parse_diff("multi.txt", sample_diff_multi).value, console=console)
        text = console.export_text()
        assert "@@ -10,3 +11,2 @@" in text
        assert "-removed line" in text

    def test_commit_line(self):
        console = _console()
        terminal.render_commit(CommitResult(True, "abc1234", "Add"), console=console)
        assert "abc1234" in console.export_text()

    def test_bracketed_path_printed_literally(self):
        console = _console()
        record = FileStatusRecord("pages/[id].tsx", FileChangeStatus.ADDED, True)
        terminal.render_status([record], console=console)
        assert "pages/[id].tsx" in console.export_text()

    def test_bracketed_diff_path_printed_literally(self):
        console = _console()
        terminal.render_diff(parse_diff("app/[slug]/page.py", "").value, console=console)
        assert "app/[slug]/page.py" in console.export_text()

    def test_commit_message_with_markup_tags(self):
        console = _console()
        terminal.render_commit(CommitResult(True, "abc1234", "fix [/b] parsing [red]now"), console=console)
        assert "fix [/b] parsing [red]now" in console.export_text()
