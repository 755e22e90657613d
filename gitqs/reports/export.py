"""
JSON export for gitqs.

Saves the filtered commit log, with per-file numstat, as a JSON array.
"""

from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter

from gitqs.errors import OutputWriteError
from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import CommitRecord
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, format_number

COMMITS_ADAPTER = TypeAdapter(List[CommitRecord])


def export_commits_json(commits: List[CommitRecord]) -> bytes:
    """Serialize commits to indented JSON."""
    return COMMITS_ADAPTER.dump_json(commits, indent=2)


def generate_json_output(
    git: GitRunner,
    filters: FilterContext,
    output_path: Union[str, Path],
    color_enabled: bool = True
) -> str:
    """
    Write the commit log to output_path as JSON.

    Returns a short confirmation for the console.

    Raises:
        OutputWriteError: If the file or its directory cannot be written
    """
    commits = list(fetch_commits(git, filters, numstat=True))

    path = Path(output_path).expanduser()
    try:
        if path.parent and not path.parent.exists():
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(export_commits_json(commits))
    except OSError as e:
        raise OutputWriteError(str(path), e.strerror or str(e))

    lines = [bold("SAVE GIT LOG OUTPUT IN JSON FORMAT", color_enabled)]
    lines.append("")
    lines.append(f"Saved {format_number(len(commits))} commits to {path}")
    return '\n'.join(lines)
