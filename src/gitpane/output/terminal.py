"""Rich terminal views for status, branches, diffs and commits."""

from __future__ import annotations

from collections import Counter
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.text import Text

from gitpane.git.models import (
    BranchRecord,
    CommitResult,
    DiffResult,
    FileChangeStatus,
    FileStatusRecord,
    HunkHeader,
)

_STATUS_STYLE = {
    FileChangeStatus.MODIFIED: "yellow",
    FileChangeStatus.ADDED: "green",
    FileChangeStatus.DELETED: "red",
    FileChangeStatus.UNTRACKED: "bright_black",
    FileChangeStatus.RENAMED: "cyan",
}

_STATUS_ICON = {
    FileChangeStatus.MODIFIED: "M",
    FileChangeStatus.ADDED: "A",
    FileChangeStatus.DELETED: "D",
    FileChangeStatus.UNTRACKED: "?",
    FileChangeStatus.RENAMED: "R",
}


def _status_pill(status: FileChangeStatus) -> Text:
    return Text(f" {_STATUS_ICON[status]} {status.value} ", style=_STATUS_STYLE[status])


def render_status(
    records: List[FileStatusRecord],
    *,
    show_summary: bool = True,
    console: Optional[Console] = None,
) -> None:
    console = console or Console()

    if not records:
        console.print("[bold green]✅ Working tree clean.[/bold green]")
        return

    table = Table(title="Changes", title_style="bold", border_style="dim")
    table.add_column("Status", justify="center", width=14)
    table.add_column("Staged", justify="center")
    table.add_column("Path", style="magenta")

    for record in records:
        table.add_row(
            _status_pill(record.status),
            "[green]✓[/green]" if record.staged else "",
            Text(record.path),
        )
    console.print(table)

    if show_summary:
        counts = Counter(r.status.value for r in records)
        staged = sum(1 for r in records if r.staged)
        parts = ", ".join(f"{n} {status}" for status, n in sorted(counts.items()))
        console.print(f"[dim]{len(records)} file(s): {parts}; {staged} staged[/dim]")


def render_branches(records: List[BranchRecord], *, console: Optional[Console] = None) -> None:
    console = console or Console()

    if not records:
        console.print("[dim]No branches.[/dim]")
        return

    for record in records:
        if record.is_current:
            console.print(f"[bold green]* {record.name}[/bold green]")
        else:
            console.print(f"  {record.name}")


def render_diff(result: DiffResult, *, console: Optional[Console] = None) -> None:
    console = console or Console()

    console.print(Text(result.file_path, style="bold"))
    if not result.hunks:
        console.print("[dim]No changes.[/dim]")
        return

    for hunk in result.hunks:
        console.print(Text(hunk.header, style="bold cyan"))
        for line in hunk.lines:
            if line.startswith("+"):
                style = "green"
            elif line.startswith("-"):
                style = "red"
            elif line.startswith("\\"):
                style = "dim"
            else:
                style = ""
            console.print(Text(line, style=style))


def render_hunk_header(header: HunkHeader, *, console: Optional[Console] = None) -> None:
    console = console or Console()
    console.print(Text(header.header, style="bold cyan"))
    console.print(
        f"  old: start={header.old_start} lines={header.old_lines}\n"
        f"  new: start={header.new_start} lines={header.new_lines}"
    )


def render_commit(result: CommitResult, *, console: Optional[Console] = None) -> None:
    console = console or Console()
    sha = result.commit_sha or "unknown"
    line = Text.assemble(("✓", "green"), " Committed ", (sha, "yellow"), " ", result.message)
    console.print(line)
