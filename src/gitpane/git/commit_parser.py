"""Extract the short SHA from ``git commit`` output.

git prints a summary such as ``[main abc1234] Add feature``; the SHA is the
text between the first space and the first ``]``.
"""

from __future__ import annotations

from gitpane.git.models import CommitOutcome
from gitpane.git.result import Ok, ParseResult


def extract_commit_sha(output: str) -> ParseResult[CommitOutcome]:
    """Return the SHA from the first bracketed summary line, else ``""``."""
    for raw_line in output.split("\n"):
        line = raw_line.strip()
        if "]" not in line:
            continue
        start = line.find(" ")
        end = line.find("]")
        if start != -1 and start < end:
            return Ok(CommitOutcome(short_sha=line[start + 1:end].strip()))
    return Ok(CommitOutcome())
