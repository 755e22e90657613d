"""
ETL package - extract git output and parse it into records.

Main entry point for log-based reports is fetch_commits(), which runs
one structured `git log` query and streams the parsed commits.
"""

from typing import Iterator

from gitqs.etl.extractor import GitRunner, run_command, check_dependencies, check_git_repo
from gitqs.etl.parser import LOG_FORMAT, parse_log
from gitqs.models.entities import CommitRecord
from gitqs.models.filters import FilterContext


def fetch_commits(
    git: GitRunner,
    filters: FilterContext,
    *extra: str,
    numstat: bool = False,
    use_window: bool = True,
    use_pathspec: bool = True
) -> Iterator[CommitRecord]:
    """
    Run a filtered `git log` and parse its output.

    Args:
        git: Runner used to invoke git
        filters: Active filter window
        extra: Additional log options (e.g. --author=..., --max-count=...)
        numstat: Include per-file insertion/deletion counts
        use_window: Apply since/until
        use_pathspec: Apply the pathspec

    Returns:
        Iterator of CommitRecord, newest first
    """
    options = [f"--format={LOG_FORMAT}"]
    if numstat:
        options.append("--numstat")
    options.extend(extra)

    text = git.run(filters.log_args(*options, use_window=use_window, use_pathspec=use_pathspec))
    return parse_log(text)


__all__ = [
    "GitRunner",
    "run_command",
    "check_dependencies",
    "check_git_repo",
    "fetch_commits",
]
