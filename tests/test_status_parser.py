"""Tests for the porcelain status parser."""

import pytest

from gitpane.git.models import FileChangeStatus, FileStatusRecord
from gitpane.git.result import Ok
from gitpane.git.status_parser import classify, parse_status


class TestParseStatus:
    def test_all_status_types(self, sample_status):
        result = parse_status(sample_status)
        assert isinstance(result, Ok)

        assert result.value == [
            FileStatusRecord("modified.txt", FileChangeStatus.MODIFIED, False),
            FileStatusRecord("staged.txt", FileChangeStatus.MODIFIED, True),
            FileStatusRecord("added.txt", FileChangeStatus.ADDED, True),
            FileStatusRecord("deleted.txt", FileChangeStatus.DELETED, True),
            FileStatusRecord("untracked.txt", FileChangeStatus.UNTRACKED, False),
            FileStatusRecord("renamed.txt", FileChangeStatus.RENAMED, True),
        ]

    def test_empty_output(self):
        result = parse_status("")
        assert result.ok
        assert result.value == []

    def test_whitespace_only(self):
        assert parse_status("   \n  \n").value == []

    def test_worktree_deleted(self):
        records = parse_status(" D deleted-from-worktree.txt").value
        assert len(records) == 1
        assert records[0].status == FileChangeStatus.DELETED
        assert records[0].staged is False

    def test_skips_short_lines(self):
        records = parse_status("ab\n M valid.txt\nxy").value
        assert len(records) == 1
        assert records[0].path == "valid.txt"

    def test_three_char_line_skipped(self):
        assert parse_status("?? ").value == []

    def test_trailing_newline_ignored(self):
        records = parse_status(" M a.txt\n M b.txt\n\n").value
        assert [r.path for r in records] == ["a.txt", "b.txt"]

    def test_path_trimmed(self):
        records = parse_status(" M   spaced.txt  \r\n").value
        assert records[0].path == "spaced.txt"

    def test_rename_path_kept_verbatim(self):
        records = parse_status("R  old.txt -> new.txt").value
        assert records[0].path == "old.txt -> new.txt"
        assert records[0].status == FileChangeStatus.RENAMED

    def test_path_with_spaces(self):
        records = parse_status("?? my notes.txt").value
        assert records[0].path == "my notes.txt"

    def test_order_preserved(self):
        text = "\n".join(f" M file{i}.txt" for i in range(20))
        records = parse_status(text).value
        assert [r.path for r in records] == [f"file{i}.txt" for i in range(20)]

    def test_same_input_same_output(self, sample_status):
        first = parse_status(sample_status).value
        second = parse_status(sample_status).value
        assert first == second
        assert first is not second


class TestClassificationOrder:
    @pytest.mark.parametrize(
        "codes, expected",
        [
            ("??", (FileChangeStatus.UNTRACKED, False)),
            ("AM", (FileChangeStatus.ADDED, True)),
            ("AD", (FileChangeStatus.ADDED, True)),
            ("DM", (FileChangeStatus.DELETED, True)),
            ("RM", (FileChangeStatus.RENAMED, True)),
            ("MM", (FileChangeStatus.MODIFIED, True)),
            ("MD", (FileChangeStatus.MODIFIED, True)),
            (" M", (FileChangeStatus.MODIFIED, False)),
            (" D", (FileChangeStatus.DELETED, False)),
            ("UU", (FileChangeStatus.MODIFIED, False)),
            ("C ", (FileChangeStatus.MODIFIED, False)),
            ("!!", (FileChangeStatus.MODIFIED, False)),
        ],
    )
    def test_priority_chain(self, codes, expected):
        assert classify(codes[0], codes[1]) == expected

    def test_added_then_modified_is_added(self):
        records = parse_status("AM both.txt").value
        assert records[0].status == FileChangeStatus.ADDED
        assert records[0].staged is True

    def test_question_mark_needs_both_columns(self):
        # '?' in only the index column falls through to the work-tree check.
        records = parse_status("?M odd.txt").value
        assert records[0].status == FileChangeStatus.MODIFIED
        assert records[0].staged is False


class TestRecords:
    def test_records_are_frozen(self):
        record = parse_status(" M a.txt").value[0]
        with pytest.raises(AttributeError):
            record.path = "b.txt"  # type: ignore[misc]

    def test_status_is_str_enum(self):
        record = parse_status("A  a.txt").value[0]
        assert record.status == "added"
