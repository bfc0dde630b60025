"""Shared test fixtures — sample git output, temp git repos."""

from __future__ import annotations

import subprocess
import textwrap
from pathlib import Path

import pytest


@pytest.fixture
def sample_status() -> str:
    """``git status --porcelain`` covering every classification."""
    return (
        " M modified.txt\n"
        "M  staged.txt\n"
        "A  added.txt\n"
        "D  deleted.txt\n"
        "?? untracked.txt\n"
        "R  renamed.txt"
    )


@pytest.fixture
def sample_branches() -> str:
    return "* main\n  develop\n  feature/login"


@pytest.fixture
def sample_diff_multi() -> str:
    """Two hunks, no preamble."""
    return (
        "@@ -1,3 +1,4 @@\n"
        " line1\n"
        "+new line\n"
        " line2\n"
        "@@ -10,3 +11,2 @@\n"
        " line10\n"
        "-removed line\n"
        " line11"
    )


@pytest.fixture
def sample_diff_full() -> str:
    """A complete ``git diff`` for one file, preamble included."""
    return textwrap.dedent("""\
        diff --git a/app.py b/app.py
        index 1234567..abcdef0 100644
        --- a/app.py
        +++ b/app.py
        @@ -1,4 +1,5 @@ import os
         import sys
        +import json

         def main():
             pass
        @@ -20,2 +21,2 @@ def helper():
        -    return 1
        +    return 2
         # end
    """)


@pytest.fixture
def sample_commit_output() -> str:
    return "[main abc1234] Add new feature\n 1 file changed, 2 insertions(+)\n"


def _git(repo: Path, *args: str) -> str:
    return subprocess.run(
        ["git", *args], cwd=repo, capture_output=True, text=True, check=True,
    ).stdout


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository on ``main`` with one commit."""
    subprocess.run(["git", "init", str(tmp_path)], capture_output=True, check=True)
    _git(tmp_path, "symbolic-ref", "HEAD", "refs/heads/main")
    _git(tmp_path, "config", "user.email", "test@test.com")
    _git(tmp_path, "config", "user.name", "Test")
    _git(tmp_path, "config", "commit.gpgsign", "false")
    # Initial commit
    readme = tmp_path / "README.md"
    readme.write_text("# Test\n\nfirst line\nsecond line\n")
    _git(tmp_path, "add", ".")
    _git(tmp_path, "commit", "-m", "init")
    return tmp_path


@pytest.fixture
def git():
    """Run git in a repo and return stdout: ``git(repo, "log", "-1")``."""
    return _git
