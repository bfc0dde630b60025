"""Workspace service — runs git for one repository and parses its output.

This is the layer a UI talks to: every method returns the parsed records
from ``gitpane.git`` and raises ``WorkspaceError`` with the failing
operation named in the message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional, Union

from gitpane.git import adapter
from gitpane.git.adapter import DEFAULT_TIMEOUT, GitError, GitRunner, get_repo_root, is_git_repo
from gitpane.git.branch_parser import parse_branches
from gitpane.git.commit_parser import extract_commit_sha
from gitpane.git.diff_parser import parse_diff
from gitpane.git.models import BranchRecord, CommitResult, DiffResult, FileStatusRecord, RepoInfo
from gitpane.git.result import ParseError, ParseResult
from gitpane.git.status_parser import parse_status
from gitpane.log import get_logger

logger = get_logger("workspace")


class WorkspaceError(Exception):
    """Raised when a workspace operation cannot be completed."""


class Workspace:
    """A git repository plus the runner used to query it.

    *runner* takes the git arguments and returns stdout, raising
    ``GitError`` on failure. ``open`` binds ``run_git`` to the repo root;
    tests pass a fake.
    """

    def __init__(self, root: Union[str, Path], runner: GitRunner) -> None:
        self.repo = RepoInfo(path=str(root))
        self._run = runner

    @classmethod
    def open(
        cls,
        path: Union[str, Path],
        *,
        timeout: int = DEFAULT_TIMEOUT,
        binary: str = "git",
    ) -> "Workspace":
        """Open the repository containing *path* and record its current branch."""
        abs_path = Path(path).resolve()
        if not is_git_repo(abs_path, timeout=timeout, binary=binary):
            raise WorkspaceError(f"not a git repository: {abs_path}")
        try:
            root = get_repo_root(abs_path, timeout=timeout, binary=binary)
        except GitError as exc:
            raise WorkspaceError(f"failed to find repo root: {exc}") from exc

        workspace = cls(root, adapter.runner_for(root, timeout=timeout, binary=binary))
        try:
            workspace.repo.current_branch = workspace.current_branch()
        except WorkspaceError as exc:
            # Fresh repositories without commits can still be browsed.
            logger.debug("current branch unknown: %s", exc)
        logger.info("opened repository %s", root)
        return workspace

    @property
    def root(self) -> Path:
        return Path(self.repo.path)

    # ── queries ──────────────────────────────────────────────────────────

    def get_status(self) -> List[FileStatusRecord]:
        output = self._git("failed to get git status", adapter.get_status_output)
        return self._unwrap(parse_status(output), "failed to parse git status")

    def get_diff(self, file_path: str) -> DiffResult:
        """Diff of *file_path*: unstaged changes, else staged changes."""
        output = self._git(f"failed to get diff for {file_path}", adapter.get_diff_output, file_path)
        if not output.strip():
            output = self._git(
                f"failed to get staged diff for {file_path}",
                adapter.get_diff_output,
                file_path,
                True,
            )
        return self._unwrap(parse_diff(file_path, output), f"failed to parse diff for {file_path}")

    def get_branches(self) -> List[BranchRecord]:
        output = self._git("failed to list branches", adapter.get_branch_output)
        return self._unwrap(parse_branches(output), "failed to parse branches")

    def current_branch(self) -> str:
        return self._git("failed to get current branch", adapter.get_current_branch)

    # ── mutations ────────────────────────────────────────────────────────

    def switch_branch(self, name: str) -> None:
        self._git(f"failed to switch to branch {name}", adapter.checkout, name)
        self.repo.current_branch = name
        logger.info("switched to branch %s", name)

    def create_branch(self, name: str) -> None:
        """Create *name* from HEAD and check it out."""
        self._git(f"failed to create branch {name}", adapter.create_branch, name)
        self.repo.current_branch = name
        logger.info("created branch %s", name)

    def commit_files(self, files: List[str], message: str) -> CommitResult:
        """Stage *files* and commit them with *message*."""
        if not files:
            raise WorkspaceError("no files to commit")
        if not message:
            raise WorkspaceError("commit message required")

        self._git("failed to stage files", adapter.stage_files, files)
        output = self._git("failed to commit", adapter.commit, message)
        sha = self._unwrap(extract_commit_sha(output), "failed to read commit output").short_sha
        logger.info("committed %d file(s) as %s", len(files), sha or "<unknown>")
        return CommitResult(success=True, commit_sha=sha, message=message)

    def push(self) -> None:
        self._git("failed to push", adapter.push)
        logger.info("pushed %s", self.repo.current_branch or "HEAD")

    def commit_and_push(self, files: List[str], message: str) -> CommitResult:
        result = self.commit_files(files, message)
        try:
            self.push()
        except WorkspaceError as exc:
            raise WorkspaceError(f"commit succeeded but push failed: {exc}") from exc
        return result

    # ── helpers ──────────────────────────────────────────────────────────

    def _git(self, context: str, operation: Callable, *args):
        """Call an adapter helper with this workspace's runner."""
        try:
            return operation(self._run, *args)
        except GitError as exc:
            raise WorkspaceError(f"{context}: {exc}") from exc

    @staticmethod
    def _unwrap(result: ParseResult, context: str):
        try:
            return result.unwrap()
        except ParseError as exc:
            raise WorkspaceError(f"{context}: {exc}") from exc


def open_workspace(path: Optional[Union[str, Path]] = None, **kwargs) -> Workspace:
    """``Workspace.open`` defaulting to the current directory."""
    return Workspace.open(path or Path.cwd(), **kwargs)
