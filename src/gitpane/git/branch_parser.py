"""Parser for plain ``git branch`` listings."""

from __future__ import annotations

from typing import List

from gitpane.git.models import BranchRecord
from gitpane.git.result import Ok, ParseResult

_MIN_LINE_LENGTH = 3
_NAME_COLUMN = 2
_CURRENT_MARKER = "*"


def parse_branches(output: str) -> ParseResult[List[BranchRecord]]:
    """Parse ``git branch`` output. The ``* `` line is the checked-out branch."""
    if not output.strip():
        return Ok([])

    branches: List[BranchRecord] = []
    for line in output.rstrip("\n").split("\n"):
        if len(line) < _MIN_LINE_LENGTH:
            continue
        branches.append(
            BranchRecord(
                name=line[_NAME_COLUMN:].strip(),
                is_current=line[0] == _CURRENT_MARKER,
                is_remote=False,
            )
        )

    return Ok(branches)
