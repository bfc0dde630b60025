"""Git subprocess wrapper — status, branches, diffs, commits, push.

The per-command helpers take a runner (git arguments in, stdout out) so
callers can swap ``run_git`` for a fake.
"""

from __future__ import annotations

import subprocess
from functools import partial
from pathlib import Path
from typing import Callable, List, Optional

from gitpane.log import get_logger

logger = get_logger("git.adapter")

DEFAULT_TIMEOUT = 30

GitRunner = Callable[[List[str]], str]


class GitError(Exception):
    """Raised when git is unavailable, times out, or exits non-zero."""


def run_git(
    args: List[str],
    cwd: Path,
    timeout: int = DEFAULT_TIMEOUT,
    binary: str = "git",
) -> str:
    """Run a git command and return stdout. Raises GitError on failure."""
    if not Path(cwd).is_dir():
        raise GitError(f"not a directory: {cwd}")

    logger.debug("running %s %s in %s", binary, " ".join(args), cwd)
    try:
        result = subprocess.run(
            [binary, *args],
            cwd=cwd,
            capture_output=True,
            text=True,
            timeout=timeout,
            encoding="utf-8",
            errors="replace",
        )
    except FileNotFoundError:
        raise GitError(f"{binary} is not installed or not on PATH")
    except subprocess.TimeoutExpired:
        raise GitError(f"git command timed out after {timeout}s: git {' '.join(args)}")

    if result.returncode != 0:
        detail = result.stderr.strip() or result.stdout.strip()
        raise GitError(f"git {' '.join(args)} failed: {detail}")
    return result.stdout


def is_git_repo(path: Path, **kwargs) -> bool:
    """Return True if *path* is inside a git work tree."""
    try:
        run_git(["rev-parse", "--git-dir"], cwd=path, **kwargs)
    except GitError:
        return False
    return True


def get_repo_root(cwd: Optional[Path] = None, **kwargs) -> Path:
    """Return the root of the git repository containing *cwd*."""
    cwd = cwd or Path.cwd()
    out = run_git(["rev-parse", "--show-toplevel"], cwd=cwd, **kwargs)
    return Path(out.strip())


def runner_for(repo_root: Path, timeout: int = DEFAULT_TIMEOUT, binary: str = "git") -> GitRunner:
    """Bind ``run_git`` to one repository, for the helpers below."""
    return partial(run_git, cwd=repo_root, timeout=timeout, binary=binary)


# ── queries ───────────────────────────────────────────────────────────────────


def get_status_output(run: GitRunner) -> str:
    """Return ``git status --porcelain`` output."""
    return run(["status", "--porcelain"])


def get_branch_output(run: GitRunner) -> str:
    """Return the plain ``git branch`` listing."""
    return run(["branch"])


def get_current_branch(run: GitRunner) -> str:
    """Return the checked-out branch name, empty when HEAD is detached."""
    return run(["branch", "--show-current"]).strip()


def get_diff_output(run: GitRunner, file_path: str, cached: bool = False) -> str:
    """Return the unified diff of one file (staged changes with *cached*)."""
    args = ["diff", "--no-color"]
    if cached:
        args.append("--cached")
    return run([*args, "--", file_path])


# ── mutations ─────────────────────────────────────────────────────────────────


def checkout(run: GitRunner, name: str) -> None:
    run(["checkout", name])


def create_branch(run: GitRunner, name: str) -> None:
    """Create *name* from HEAD and check it out."""
    run(["checkout", "-b", name])


def stage_files(run: GitRunner, files: List[str]) -> None:
    run(["add", "--", *files])


def commit(run: GitRunner, message: str) -> str:
    """Commit the index and return git's summary output."""
    return run(["commit", "-m", message])


def push(run: GitRunner) -> None:
    run(["push"])
