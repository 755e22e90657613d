"""
My daily stats report for gitqs.

Shows today's working-tree diff against where HEAD stood at local
midnight, and how many commits the configured git user made today.
Day boundaries are the local wall clock, not UTC.
"""

from datetime import datetime
from typing import Optional

from gitqs.errors import MissingRequiredInput
from gitqs.etl.extractor import GitRunner
from gitqs.etl.parser import parse_shortstat
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, format_number
from gitqs.utils.timestamps import end_of_local_day, start_of_local_day


def generate_my_daily_stats(
    git: GitRunner,
    filters: FilterContext,
    now: Optional[datetime] = None,
    color_enabled: bool = True
) -> str:
    """
    Generate today's diff and commit count for the current git user.

    Args:
        git: Runner used to query the repository
        filters: Active filter window (merge view, branch, log options)
        now: Local wall-clock time, defaults to datetime.now()
        color_enabled: Whether to apply colors

    Raises:
        MissingRequiredInput: If user.name is not configured
    """
    now = now or datetime.now()
    midnight = start_of_local_day(now)
    end_of_day = end_of_local_day(now)

    user = git.config_get('user.name')
    if not user:
        raise MissingRequiredInput("git user.name is not configured; run `git config user.name <name>`")

    diff = parse_shortstat(git.run([
        'diff', '--shortstat', f"HEAD@{{{midnight:%Y-%m-%d %H:%M:%S}}}",
    ]))

    log_text = git.run(filters.log_args(
        '--format=%H',
        f'--author={user}',
        f'--since={midnight:%Y-%m-%dT%H:%M:%S}',
        f'--until={end_of_day:%Y-%m-%dT%H:%M:%S}',
        use_window=False,
        use_pathspec=False,
    ))
    commits = sum(1 for line in log_text.splitlines() if line.strip())

    lines = [bold("MY DAILY STATS", color_enabled)]
    lines.append(f"({midnight:%Y-%m-%d} local time, as {user})")
    lines.append("")
    lines.append(f"  {format_number(diff.files_changed)} files changed")
    lines.append(f"  {format_number(diff.insertions)} insertions(+)")
    lines.append(f"  {format_number(diff.deletions)} deletions(-)")
    lines.append(f"  {format_number(commits)} commits")

    return '\n'.join(lines)
