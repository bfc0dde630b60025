"""Data models produced by the git output parsers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class FileChangeStatus(str, Enum):
    MODIFIED = "modified"
    ADDED = "added"
    DELETED = "deleted"
    UNTRACKED = "untracked"
    RENAMED = "renamed"


@dataclass(frozen=True, slots=True)
class FileStatusRecord:
    """One line of ``git status --porcelain``."""

    path: str
    status: FileChangeStatus
    staged: bool  # change is in the index rather than only the work tree


@dataclass(frozen=True, slots=True)
class BranchRecord:
    """One line of ``git branch``."""

    name: str
    is_current: bool = False
    is_remote: bool = False  # local listing only; never set by the parser


@dataclass(frozen=True)
class HunkHeader:
    """Numeric ranges from an ``@@ -a,b +c,d @@`` line."""

    header: str
    old_start: int = 0
    old_lines: int = 0
    new_start: int = 0
    new_lines: int = 0


@dataclass(frozen=True)
class DiffHunk:
    """A single ``@@`` block and the body lines that follow it."""

    header: str
    old_start: int = 0
    old_lines: int = 0
    new_start: int = 0
    new_lines: int = 0
    lines: Tuple[str, ...] = ()


@dataclass(frozen=True)
class DiffResult:
    """Parsed diff for one file. ``raw_text`` is the untouched input."""

    file_path: str
    raw_text: str
    hunks: Tuple[DiffHunk, ...] = ()


@dataclass(frozen=True)
class CommitOutcome:
    short_sha: str = ""  # empty when no summary line was found


@dataclass(frozen=True)
class CommitResult:
    """Outcome of staging and committing a set of files."""

    success: bool
    commit_sha: str
    message: str


@dataclass
class RepoInfo:
    path: str
    current_branch: str = ""
