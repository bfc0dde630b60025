"""Parser for ``git status --porcelain`` (short format, v1)."""

from __future__ import annotations

from typing import List, Tuple

from gitpane.git.models import FileChangeStatus, FileStatusRecord
from gitpane.git.result import Ok, ParseResult

# XY<space><path>: shortest line that still carries a path.
_MIN_LINE_LENGTH = 4
_PATH_COLUMN = 3


def classify(index_code: str, worktree_code: str) -> Tuple[FileChangeStatus, bool]:
    """Map the two porcelain status columns to ``(status, staged)``.

    Codes combine (``AM`` is added then modified), so the checks run in a
    fixed priority order and the first hit wins.
    """
    if index_code == "?" and worktree_code == "?":
        return FileChangeStatus.UNTRACKED, False
    if index_code == "A":
        return FileChangeStatus.ADDED, True
    if index_code == "D":
        return FileChangeStatus.DELETED, True
    if index_code == "R":
        return FileChangeStatus.RENAMED, True
    if index_code == "M":
        return FileChangeStatus.MODIFIED, True
    if worktree_code == "M":
        return FileChangeStatus.MODIFIED, False
    if worktree_code == "D":
        return FileChangeStatus.DELETED, False
    return FileChangeStatus.MODIFIED, False


def parse_status(output: str) -> ParseResult[List[FileStatusRecord]]:
    """Parse porcelain status text into records, in input order.

    Lines too short to hold a path are dropped. Always returns ``Ok``.
    """
    if not output.strip():
        return Ok([])

    records: List[FileStatusRecord] = []
    for line in output.rstrip("\n").split("\n"):
        if len(line) < _MIN_LINE_LENGTH:
            continue

        status, staged = classify(line[0], line[1])
        records.append(
            FileStatusRecord(
                path=line[_PATH_COLUMN:].strip(),
                status=status,
                staged=staged,
            )
        )

    return Ok(records)
