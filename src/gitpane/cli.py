"""gitpane CLI — Typer application over the workspace and the output parsers."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List, NoReturn, Optional

import typer
from rich.console import Console
from rich.markup import escape

from gitpane import __version__

app = typer.Typer(
    name="gitpane",
    help="Structured views of git status, branches, diffs and commits.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console(stderr=True)

PARSE_KINDS = ("status", "branches", "diff", "hunk", "commit")


# ── shared option handling ────────────────────────────────────────────────────


def _load(repo: Optional[str], config: Optional[str], format: Optional[str], verbose: bool, debug: bool):
    """Open the workspace, load config, set up logging. Exit 2 on failure."""
    from gitpane.config.loader import ConfigError, load_config
    from gitpane.config.schema import OUTPUT_FORMATS
    from gitpane.git.adapter import GitError, get_repo_root
    from gitpane.log import setup_logging
    from gitpane.workspace import WorkspaceError, open_workspace

    if format and format not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    try:
        repo_root = get_repo_root(Path(repo) if repo else None)
    except GitError as exc:
        _fail(exc)

    try:
        cfg = load_config(repo_root, config)
    except ConfigError as exc:
        console.print(f"[bold red]Config error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc

    setup_logging("debug" if debug else "info" if verbose else cfg.logging.level)

    try:
        workspace = open_workspace(repo_root, timeout=cfg.git.timeout, binary=cfg.git.binary)
    except WorkspaceError as exc:
        _fail(exc)

    if format:
        cfg.output.format = format  # type: ignore[assignment]
    return workspace, cfg


def _emit(value, fmt: str) -> None:
    from gitpane.output import serialize

    print(serialize.render(value, fmt), end="" if fmt == "yaml" else "\n")


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(code=2) from exc


# ── status ────────────────────────────────────────────────────────────────────


@app.command()
def status(
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitpane.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git invocations"),
) -> None:
    """List changed files with their status and staged flag."""
    from gitpane.output import terminal
    from gitpane.workspace import WorkspaceError

    workspace, cfg = _load(repo, config, format, verbose, debug)
    try:
        records = workspace.get_status()
    except WorkspaceError as exc:
        _fail(exc)

    if cfg.output.format == "terminal":
        if verbose or debug:
            console.print(f"[dim]Repo root: {escape(str(workspace.root))}[/dim]")
            console.print(f"[dim]Branch: {escape(workspace.repo.current_branch or '(none)')}[/dim]")
        terminal.render_status(records, show_summary=cfg.output.show_summary)
    else:
        _emit(records, cfg.output.format)


# ── branches ──────────────────────────────────────────────────────────────────


@app.command()
def branches(
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitpane.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git invocations"),
) -> None:
    """List local branches, marking the current one."""
    from gitpane.output import terminal
    from gitpane.workspace import WorkspaceError

    workspace, cfg = _load(repo, config, format, verbose, debug)
    try:
        records = workspace.get_branches()
    except WorkspaceError as exc:
        _fail(exc)

    if cfg.output.format == "terminal":
        terminal.render_branches(records)
    else:
        _emit(records, cfg.output.format)


# ── diff ──────────────────────────────────────────────────────────────────────


@app.command()
def diff(
    file: str = typer.Argument(..., help="File to diff (unstaged, else staged changes)"),
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitpane.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git invocations"),
) -> None:
    """Show the hunks of one file's diff."""
    from gitpane.output import terminal
    from gitpane.workspace import WorkspaceError

    workspace, cfg = _load(repo, config, format, verbose, debug)
    try:
        result = workspace.get_diff(file)
    except WorkspaceError as exc:
        _fail(exc)

    if cfg.output.format == "terminal":
        terminal.render_diff(result)
    else:
        _emit(result, cfg.output.format)


# ── commit ────────────────────────────────────────────────────────────────────


@app.command()
def commit(
    files: List[str] = typer.Argument(..., help="Files to stage and commit"),
    message: str = typer.Option(..., "--message", "-m", help="Commit message"),
    push: bool = typer.Option(False, "--push", help="Push after committing"),
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitpane.toml"),
    format: Optional[str] = typer.Option(None, "--format", "-f", help="Output format: terminal | json | yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git invocations"),
) -> None:
    """Stage FILES and commit them, optionally pushing."""
    from gitpane.output import terminal
    from gitpane.workspace import WorkspaceError

    workspace, cfg = _load(repo, config, format, verbose, debug)
    try:
        if push:
            result = workspace.commit_and_push(files, message)
        else:
            result = workspace.commit_files(files, message)
    except WorkspaceError as exc:
        _fail(exc)

    if cfg.output.format == "terminal":
        terminal.render_commit(result)
    else:
        _emit(result, cfg.output.format)


# ── switch ────────────────────────────────────────────────────────────────────


@app.command()
def switch(
    name: str = typer.Argument(..., help="Branch to check out"),
    create: bool = typer.Option(False, "--create", "-b", help="Create the branch first"),
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
    config: Optional[str] = typer.Option(None, "--config", "-c", help="Path to .gitpane.toml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
    debug: bool = typer.Option(False, "--debug", help="Debug output, including git invocations"),
) -> None:
    """Switch to (or create and switch to) a branch."""
    from gitpane.workspace import WorkspaceError

    workspace, _ = _load(repo, config, None, verbose, debug)
    try:
        if create:
            workspace.create_branch(name)
        else:
            workspace.switch_branch(name)
    except WorkspaceError as exc:
        _fail(exc)

    console.print(f"[green]✓[/green] On branch {escape(workspace.repo.current_branch)}")


# ── parse ─────────────────────────────────────────────────────────────────────


@app.command()
def parse(
    kind: str = typer.Argument(..., help="status | branches | diff | hunk | commit"),
    path: str = typer.Option("", "--path", "-p", help="File path recorded in diff results"),
    format: str = typer.Option("json", "--format", "-f", help="Output format: terminal | json | yaml"),
) -> None:
    """Parse raw git output from stdin without running git."""
    from gitpane.config.schema import OUTPUT_FORMATS
    from gitpane.git import (
        extract_commit_sha,
        parse_branches,
        parse_diff,
        parse_hunk_header,
        parse_status,
    )
    from gitpane.output import terminal

    if kind not in PARSE_KINDS:
        console.print(f"[bold red]Unknown kind:[/bold red] {kind}")
        raise typer.Exit(code=2)
    if format not in OUTPUT_FORMATS:
        console.print(f"[bold red]Invalid format:[/bold red] {format}")
        raise typer.Exit(code=2)

    text = sys.stdin.read()

    if kind == "status":
        result = parse_status(text)
    elif kind == "branches":
        result = parse_branches(text)
    elif kind == "diff":
        result = parse_diff(path, text)
    elif kind == "hunk":
        result = parse_hunk_header(text.strip("\r\n"))
    else:
        result = extract_commit_sha(text)

    if not result.ok:
        console.print(f"[bold red]Parse error:[/bold red] {escape(str(result.error))}")
        raise typer.Exit(code=1)

    value = result.value
    if format != "terminal":
        _emit(value, format)
    elif kind == "status":
        terminal.render_status(value)
    elif kind == "branches":
        terminal.render_branches(value)
    elif kind == "diff":
        terminal.render_diff(value)
    elif kind == "hunk":
        terminal.render_hunk_header(value)
    else:
        print(value.short_sha)


# ── init ──────────────────────────────────────────────────────────────────────


@app.command()
def init(
    repo: Optional[str] = typer.Option(None, "--repo", "-C", help="Repository path (default: current directory)"),
) -> None:
    """Generate a starter .gitpane.toml in the repo root."""
    from gitpane.config.defaults import DEFAULT_TOML
    from gitpane.config.loader import CONFIG_FILENAME
    from gitpane.git.adapter import GitError, get_repo_root

    try:
        repo_root = get_repo_root(Path(repo) if repo else None)
    except GitError as exc:
        _fail(exc)

    config_path = repo_root / CONFIG_FILENAME
    if config_path.exists():
        console.print(f"[yellow]⚠[/yellow]  {CONFIG_FILENAME} already exists at {config_path}")
        raise typer.Exit(code=1)

    config_path.write_text(DEFAULT_TOML, encoding="utf-8")
    console.print(f"[green]✓[/green] Created {config_path}")


# ── version ───────────────────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        print(f"gitpane {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", "-V", callback=_version_callback,
        is_eager=True, help="Show version and exit",
    ),
) -> None:
    """gitpane — structured views of git status, branches, diffs and commits."""
