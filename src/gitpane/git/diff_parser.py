"""Unified diff parser — splits one file's diff into hunks.

The file path comes from the caller, so the ``diff --git`` / ``index`` /
``---`` / ``+++`` preamble is skipped rather than interpreted. A header that
fails to parse still opens a hunk (with zeroed ranges), so one bad header
never loses the rest of the diff.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from gitpane.git.hunk_header import HUNK_MARKER, parse_hunk_header
from gitpane.git.models import DiffHunk, DiffResult, HunkHeader
from gitpane.git.result import Ok, ParseResult
from gitpane.log import get_logger

logger = get_logger("git.diff_parser")


class ParserState(str, Enum):
    NO_HUNK = "no_hunk"
    IN_HUNK = "in_hunk"


class DiffParser:
    """Line-by-line hunk accumulator for a single file's diff.

    Usage::

        result = DiffParser("src/app.py", diff_text).parse().unwrap()
        for hunk in result.hunks:
            ...

    ``feed`` and ``finish`` expose the individual transitions; ``parse``
    just drives them over the whole text.
    """

    def __init__(self, file_path: str, diff_text: str) -> None:
        self.file_path = file_path
        self.diff_text = diff_text
        self.reset()

    def reset(self) -> None:
        """Drop any hunks collected so far and return to ``NO_HUNK``."""
        self.state = ParserState.NO_HUNK
        self._hunks: List[DiffHunk] = []
        self._header: Optional[HunkHeader] = None
        self._body: List[str] = []

    @property
    def hunks(self) -> List[DiffHunk]:
        """Hunks closed so far (the open one is not included)."""
        return list(self._hunks)

    def parse(self) -> ParseResult[DiffResult]:
        """Run the whole diff through the state machine. Always ``Ok``.

        Lines are split on ``\\n`` only, so a trailing newline leaves an
        empty last body line. Each call starts from a fresh state.
        """
        self.reset()
        if self.diff_text.strip():
            for line in self.diff_text.split("\n"):
                self.feed(line)
        return Ok(self.finish())

    def feed(self, line: str) -> None:
        if line.startswith(HUNK_MARKER):
            if self.state is ParserState.IN_HUNK:
                self._close_hunk()
            self._open_hunk(line)
        elif self.state is ParserState.IN_HUNK:
            self._body.append(line)
        # NO_HUNK: preamble line, dropped

    def finish(self) -> DiffResult:
        """Close any open hunk and build the result."""
        if self.state is ParserState.IN_HUNK:
            self._close_hunk()
        return DiffResult(
            file_path=self.file_path,
            raw_text=self.diff_text,
            hunks=tuple(self._hunks),
        )

    def _open_hunk(self, line: str) -> None:
        result = parse_hunk_header(line)
        if result.ok:
            self._header = result.value
        else:
            logger.debug("%s: %s", self.file_path, result.error)
            self._header = HunkHeader(header=line)
        self._body = []
        self.state = ParserState.IN_HUNK

    def _close_hunk(self) -> None:
        header = self._header
        assert header is not None
        self._hunks.append(
            DiffHunk(
                header=header.header,
                old_start=header.old_start,
                old_lines=header.old_lines,
                new_start=header.new_start,
                new_lines=header.new_lines,
                lines=tuple(self._body),
            )
        )
        self._header = None
        self._body = []
        self.state = ParserState.NO_HUNK


def parse_diff(file_path: str, diff_text: str) -> ParseResult[DiffResult]:
    """Parse *diff_text* (the diff of *file_path*) into a ``DiffResult``."""
    return DiffParser(file_path, diff_text).parse()
