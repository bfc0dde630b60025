"""JSON / YAML serialisation of parsed git records for front-ends."""

from __future__ import annotations

import json
from typing import Any, Dict, List, Sequence, Union

import yaml

from gitpane.git.models import (
    BranchRecord,
    CommitOutcome,
    CommitResult,
    DiffHunk,
    DiffResult,
    FileStatusRecord,
    HunkHeader,
    RepoInfo,
)

Record = Union[
    BranchRecord,
    CommitOutcome,
    CommitResult,
    DiffHunk,
    DiffResult,
    FileStatusRecord,
    HunkHeader,
    RepoInfo,
]


def status_to_dict(record: FileStatusRecord) -> Dict[str, Any]:
    return {
        "path": record.path,
        "status": record.status.value,
        "staged": record.staged,
    }


def branch_to_dict(record: BranchRecord) -> Dict[str, Any]:
    return {
        "name": record.name,
        "is_current": record.is_current,
        "is_remote": record.is_remote,
    }


def hunk_to_dict(hunk: Union[DiffHunk, HunkHeader]) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "header": hunk.header,
        "old_start": hunk.old_start,
        "old_lines": hunk.old_lines,
        "new_start": hunk.new_start,
        "new_lines": hunk.new_lines,
    }
    if isinstance(hunk, DiffHunk):
        data["lines"] = list(hunk.lines)
    return data


def diff_to_dict(result: DiffResult) -> Dict[str, Any]:
    return {
        "file_path": result.file_path,
        "diff": result.raw_text,
        "hunks": [hunk_to_dict(h) for h in result.hunks],
    }


def to_dict(value: Record) -> Dict[str, Any]:
    """Convert any single parsed record to a plain dict."""
    if isinstance(value, FileStatusRecord):
        return status_to_dict(value)
    if isinstance(value, BranchRecord):
        return branch_to_dict(value)
    if isinstance(value, (DiffHunk, HunkHeader)):
        return hunk_to_dict(value)
    if isinstance(value, DiffResult):
        return diff_to_dict(value)
    if isinstance(value, CommitOutcome):
        return {"short_sha": value.short_sha}
    if isinstance(value, CommitResult):
        return {
            "success": value.success,
            "commit_sha": value.commit_sha,
            "message": value.message,
        }
    if isinstance(value, RepoInfo):
        return {"path": value.path, "current_branch": value.current_branch}
    raise TypeError(f"cannot serialise {type(value).__name__}")


def to_data(value: Union[Record, Sequence[Record]]) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    if isinstance(value, (list, tuple)):
        return [to_dict(v) for v in value]
    return to_dict(value)


def render(value: Union[Record, Sequence[Record]], fmt: str = "json") -> str:
    """Return *value* formatted as ``json`` or ``yaml``."""
    data = to_data(value)
    if fmt == "json":
        return json.dumps(data, indent=2)
    if fmt == "yaml":
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise ValueError(f"unsupported format: {fmt}")
