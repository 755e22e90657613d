"""
Changelog reports for gitqs.

Groups commit subjects under the most recent `limit` distinct commit
dates. Dates are walked newest first; each section covers the half-open
interval [date, upper) where upper is the previous section's date, and
the day after today for the newest section.
"""

from datetime import date, timedelta
from typing import Iterable, List, Optional, Tuple

from gitqs.errors import MissingRequiredInput
from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import CommitRecord
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold

ChangelogSection = Tuple[date, List[CommitRecord]]


def partition_changelog(
    commits: Iterable[CommitRecord],
    limit: int,
    today: Optional[date] = None
) -> List[ChangelogSection]:
    """
    Split commits into per-date sections, newest first.

    Args:
        commits: Commits in git order
        limit: Number of distinct dates to keep
        today: Local date used for the newest section's upper bound

    Returns:
        List of (date, commits) tuples
    """
    commits = list(commits)
    today = today or date.today()

    dates = sorted({c.committed_at.date() for c in commits}, reverse=True)[:limit]
    if not dates:
        return []

    sections = []
    upper = max(today, dates[0]) + timedelta(days=1)
    for day in dates:
        entries = [c for c in commits if day <= c.committed_at.date() < upper]
        sections.append((day, entries))
        upper = day

    return sections


def _format_sections(sections: List[ChangelogSection], color_enabled: bool) -> List[str]:
    lines = []
    for day, entries in sections:
        lines.append(bold(f"[{day.isoformat()}]", color_enabled))
        for commit in entries:
            lines.append(f" * {commit.subject} ({commit.author_name})")
        lines.append("")
    return lines


def generate_changelogs(
    git: GitRunner,
    filters: FilterContext,
    author: Optional[str] = None,
    today: Optional[date] = None,
    color_enabled: bool = True
) -> str:
    """
    Generate the changelog for the last `limit` active days.

    Args:
        git: Runner used to query the repository
        filters: Active filter window
        author: Restrict to commits matching this author (git --author)
        today: Local date for the newest section, defaults to today
        color_enabled: Whether to apply colors
    """
    title = f"GIT CHANGELOGS (LAST {filters.limit} ACTIVE DAYS)"
    extra = []
    if author:
        title = f"GIT CHANGELOGS FOR {author} (LAST {filters.limit} ACTIVE DAYS)"
        extra.append(f"--author={author}")

    lines = [bold(title, color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    sections = partition_changelog(fetch_commits(git, filters, *extra), filters.limit, today)
    if not sections:
        lines.append("No commits found.")
        return '\n'.join(lines)

    lines.extend(_format_sections(sections, color_enabled))
    return '\n'.join(lines).rstrip('\n')


def generate_changelogs_by_author(
    git: GitRunner,
    filters: FilterContext,
    author: Optional[str],
    today: Optional[date] = None,
    color_enabled: bool = True
) -> str:
    """
    Generate the changelog for one author.

    Raises:
        MissingRequiredInput: If no author is given
    """
    if not author or not author.strip():
        raise MissingRequiredInput("An author name is required for changelogs by author")
    return generate_changelogs(git, filters, author.strip(), today, color_enabled)
