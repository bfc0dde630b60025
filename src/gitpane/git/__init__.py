"""Git interface layer — output parsers, models, subprocess adapter."""

from gitpane.git.adapter import GitError, get_repo_root, is_git_repo, run_git
from gitpane.git.branch_parser import parse_branches
from gitpane.git.commit_parser import extract_commit_sha
from gitpane.git.diff_parser import DiffParser, ParserState, parse_diff
from gitpane.git.hunk_header import parse_hunk_header
from gitpane.git.models import (
    BranchRecord,
    CommitOutcome,
    CommitResult,
    DiffHunk,
    DiffResult,
    FileChangeStatus,
    FileStatusRecord,
    HunkHeader,
    RepoInfo,
)
from gitpane.git.result import Err, HunkHeaderError, Ok, ParseError, ParseResult
from gitpane.git.status_parser import classify, parse_status

__all__ = [
    "BranchRecord",
    "CommitOutcome",
    "CommitResult",
    "DiffHunk",
    "DiffParser",
    "DiffResult",
    "Err",
    "FileChangeStatus",
    "FileStatusRecord",
    "GitError",
    "HunkHeader",
    "HunkHeaderError",
    "Ok",
    "ParseError",
    "ParseResult",
    "ParserState",
    "RepoInfo",
    "classify",
    "extract_commit_sha",
    "get_repo_root",
    "is_git_repo",
    "parse_branches",
    "parse_diff",
    "parse_hunk_header",
    "parse_status",
    "run_git",
]
