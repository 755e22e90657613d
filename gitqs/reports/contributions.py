"""
Contribution stats report for gitqs.

Generates the --detailed-git-stats view: insertions, deletions, files,
commits and lines changed per author, each with its share of the total.
"""

from typing import Optional

from gitqs.etl import fetch_commits
from gitqs.etl.extractor import GitRunner
from gitqs.models.entities import CommitRecord, RenderMode, RenderSpec, SortOrder
from gitqs.models.filters import FilterContext
from gitqs.output.formatter import bold, format_number, render
from gitqs.stats.aggregator import aggregate

CONTRIBUTION_METRICS = {
    'insertions': lambda c: c.insertions,
    'deletions': lambda c: c.deletions,
    'files': lambda c: len(c.files),
    'lines': lambda c: c.lines_changed,
}


def author_identity(commit: CommitRecord) -> Optional[str]:
    """'Name <email>' as resolved through the mailmap."""
    if not commit.author_name and not commit.author_email:
        return None
    return f"{commit.author_name} <{commit.author_email}>"


def generate_detailed_git_stats(
    git: GitRunner,
    filters: FilterContext,
    color_enabled: bool = True
) -> str:
    """
    Generate per-author contribution stats.

    Args:
        git: Runner used to query the repository
        filters: Active filter window
        color_enabled: Whether to apply colors
    """
    lines = [bold("CONTRIBUTION STATS (BY AUTHOR)", color_enabled)]
    window = filters.describe()
    if window:
        lines.append(window)
    lines.append("")

    result = aggregate(
        fetch_commits(git, filters, numstat=True),
        key_fn=author_identity,
        value_fns=CONTRIBUTION_METRICS,
        time_fn=lambda c: c.authored_at,
    )

    if not result.buckets:
        lines.append("No commits found.")
        return '\n'.join(lines)

    spec = RenderSpec(
        mode=RenderMode.TABLE,
        columns=[
            'Author',
            'Insertions', '%',
            'Deletions', '%',
            'Files', '%',
            'Commits', '%',
            'Lines changed', '%',
            'First commit', 'Last commit',
        ],
        sort_order=SortOrder.BY_COUNT_DESCENDING,
        metrics=['insertions', 'deletions', 'files', 'count', 'lines'],
        show_percent=True,
        show_span=True,
        show_total=True,
    )
    lines.append(render(result, spec, color_enabled))
    lines.append("")
    lines.append(f"{format_number(len(result))} authors, "
                 f"{format_number(result.total.count)} commits")

    return '\n'.join(lines)
