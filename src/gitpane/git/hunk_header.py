"""Parser for a single unified-diff hunk header (``@@ -a,b +c,d @@``)."""

from __future__ import annotations

import re
from typing import Tuple

from gitpane.git.models import HunkHeader
from gitpane.git.result import Err, HunkHeaderError, Ok, ParseResult

HUNK_MARKER = "@@"

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(text: str) -> int:
    """Plain ASCII decimal, else 0 (no underscores, no other scripts)."""
    if not _INT_RE.fullmatch(text):
        return 0
    return int(text)


def _parse_range(token: str, sign: str) -> Tuple[int, int]:
    """Split ``-12,3`` / ``+12`` into ``(start, count)``.

    A missing count is reported as 0, not the unified-diff default of 1.
    """
    if token.startswith(sign):
        token = token[len(sign):]
    parts = token.split(",")
    start = _to_int(parts[0])
    count = _to_int(parts[1]) if len(parts) >= 2 else 0
    return start, count


def parse_hunk_header(header: str) -> ParseResult[HunkHeader]:
    """Parse the ranges of a hunk header line.

    Returns ``Err(HunkHeaderError)`` when the ``@@`` markers or the two range
    tokens are missing. Unparseable numbers become 0. Any section heading
    after the closing ``@@`` is ignored.
    """
    segments = header.split(HUNK_MARKER, 2)
    if len(segments) < 2:
        return Err(HunkHeaderError(f"invalid hunk header: {header}", header))

    range_info = segments[1].strip()
    tokens = range_info.split()
    if len(tokens) < 2:
        return Err(HunkHeaderError(f"invalid range info: {range_info}", header))

    old_start, old_lines = _parse_range(tokens[0], "-")
    new_start, new_lines = _parse_range(tokens[1], "+")
    return Ok(
        HunkHeader(
            header=header,
            old_start=old_start,
            old_lines=old_lines,
            new_start=new_start,
            new_lines=new_lines,
        )
    )
